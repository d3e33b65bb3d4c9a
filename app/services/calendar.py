"""
Content calendar queries.
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from ..logging_config import db_logger, timed
from ..models.content import Content
from ..timeutils import as_utc


@timed(db_logger)
def get_content_calendar(
    db: Session,
    user_id: int,
    start_date: datetime,
    end_date: datetime,
    platform: Optional[str] = None,
    status: Optional[str] = None,
) -> List[Content]:
    """Content with a scheduled_at inside [start_date, end_date], earliest first."""
    query = db.query(Content).filter(
        Content.user_id == user_id,
        Content.scheduled_at.isnot(None),
        Content.scheduled_at >= as_utc(start_date),
        Content.scheduled_at <= as_utc(end_date),
    )
    if platform:
        query = query.filter(Content.platform == platform)
    if status:
        query = query.filter(Content.status == status)
    return query.order_by(Content.scheduled_at, Content.id).all()
