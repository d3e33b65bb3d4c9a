"""
Scheduler gate: moves approved content onto the calendar and back.
"""
from datetime import datetime

from sqlalchemy.orm import Session

from ..constants import ContentStatus
from ..exceptions import PreconditionFailedError, ValidationError
from ..logging_config import get_logger
from ..models.content import Content
from ..timeutils import as_utc, utcnow
from .content import require_content

logger = get_logger("scheduling")


def schedule_content(db: Session, content_id: int, scheduled_at: datetime) -> Content:
    scheduled_at = as_utc(scheduled_at)
    now = utcnow()
    if scheduled_at <= now:
        raise ValidationError(
            "Cannot schedule content for a past or current time",
            {"scheduled_at": scheduled_at.isoformat()},
        )

    content = require_content(db, content_id)
    if content.status != ContentStatus.APPROVED.value:
        raise PreconditionFailedError(
            "Only approved content can be scheduled",
            {"content_id": content_id, "status": content.status},
        )

    content.scheduled_at = scheduled_at
    content.status = ContentStatus.SCHEDULED.value
    content.updated_at = now

    db.commit()
    db.refresh(content)

    logger.info("Content scheduled", content_id=content_id, scheduled_at=scheduled_at)
    return content


def unschedule_content(db: Session, content_id: int) -> Content:
    content = require_content(db, content_id)
    if content.status != ContentStatus.SCHEDULED.value:
        raise PreconditionFailedError(
            "Only scheduled content can be unscheduled",
            {"content_id": content_id, "status": content.status},
        )

    content.scheduled_at = None
    content.status = ContentStatus.APPROVED.value
    content.updated_at = utcnow()

    db.commit()
    db.refresh(content)

    logger.info("Content unscheduled", content_id=content_id)
    return content
