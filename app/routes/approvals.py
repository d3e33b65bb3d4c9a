"""
Approval routes: each reviewer's queue of content awaiting their decision.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..schemas.content import ContentResponse
from ..services.approvals import get_pending_approvals

router = APIRouter(prefix="/api/approvals", tags=["approvals"])


@router.get("/pending", response_model=List[ContentResponse])
def get_pending(user_id: int = Query(...), db: Session = Depends(get_db)):
    """Content sitting on an approval step assigned to the user."""
    return get_pending_approvals(db, user_id)
