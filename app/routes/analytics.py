"""
Analytics routes for content counts.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import datetime

from ..constants import Platform
from ..database import get_db
from ..schemas.analytics import ContentAnalytics
from ..services.analytics import get_content_analytics

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/content", response_model=ContentAnalytics)
def get_analytics(
    user_id: int = Query(...),
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    platform: Optional[Platform] = None,
    db: Session = Depends(get_db),
):
    """Counts of a user's content by status and platform."""
    return get_content_analytics(
        db,
        user_id,
        start_date=start_date,
        end_date=end_date,
        platform=platform.value if platform else None,
    )
