"""
Content analytics: counts by status and platform over a user's content.
"""
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..constants import ContentStatus, Platform
from ..logging_config import db_logger, timed
from ..models.content import Content
from ..schemas.analytics import ContentAnalytics
from ..timeutils import as_utc


@timed(db_logger)
def get_content_analytics(
    db: Session,
    user_id: int,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    platform: Optional[str] = None,
) -> ContentAnalytics:
    filters = [Content.user_id == user_id]
    if start_date:
        filters.append(Content.created_at >= as_utc(start_date))
    if end_date:
        filters.append(Content.created_at <= as_utc(end_date))
    if platform:
        filters.append(Content.platform == platform)

    rows = (
        db.query(Content.platform, Content.status, Content.ai_generated, func.count(Content.id))
        .filter(*filters)
        .group_by(Content.platform, Content.status, Content.ai_generated)
        .all()
    )

    by_platform: Dict[str, int] = {p.value: 0 for p in Platform}
    by_status: Dict[str, int] = {s.value: 0 for s in ContentStatus}
    total = 0
    ai_generated = 0
    for row_platform, row_status, row_ai, count in rows:
        total += count
        by_platform[row_platform] = by_platform.get(row_platform, 0) + count
        by_status[row_status] = by_status.get(row_status, 0) + count
        if row_ai:
            ai_generated += count

    return ContentAnalytics(
        total_content=total,
        ai_generated_content=ai_generated,
        approved_content=by_status[ContentStatus.APPROVED.value],
        rejected_content=by_status[ContentStatus.REJECTED.value],
        scheduled_content=by_status[ContentStatus.SCHEDULED.value],
        published_content=by_status[ContentStatus.PUBLISHED.value],
        by_platform=by_platform,
        by_status=by_status,
    )
