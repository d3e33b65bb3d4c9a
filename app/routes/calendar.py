"""
Calendar routes for scheduled content.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import datetime

from ..constants import ContentStatus, Platform
from ..database import get_db
from ..schemas.content import ContentResponse
from ..services.calendar import get_content_calendar

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


@router.get("", response_model=List[ContentResponse])
def get_calendar(
    user_id: int = Query(...),
    start_date: datetime = Query(...),
    end_date: datetime = Query(...),
    platform: Optional[Platform] = None,
    status: Optional[ContentStatus] = None,
    db: Session = Depends(get_db),
):
    """Get a user's content scheduled between start_date and end_date."""
    return get_content_calendar(
        db,
        user_id,
        start_date,
        end_date,
        platform=platform.value if platform else None,
        status=status.value if status else None,
    )
