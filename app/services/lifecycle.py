"""
Content lifecycle manager.

Status transitions on a content item and their side effects:

    draft -> pending_approval          (entering an approval step)
    pending_approval -> approved       (approve_content, approved=True)
    pending_approval -> rejected       (approve_content, approved=False)
    approved <-> scheduled             (see services.scheduling)

approve_content does not check the current status: content can be approved
or rejected from any state, including scheduled or published.
"""
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from ..constants import DEFAULT_REJECTION_REASON, ContentStatus
from ..logging_config import get_logger
from ..models.content import Approved, Content, Rejected
from ..timeutils import as_utc, utcnow
from .content import require_content

logger = get_logger("content")


def approve_content(
    db: Session,
    content_id: int,
    approved_by: int,
    approved: bool,
    rejection_reason: Optional[str] = None,
) -> Content:
    content = require_content(db, content_id)
    now = utcnow()

    if approved:
        content.status = ContentStatus.APPROVED.value
        content.set_outcome(Approved(by=approved_by, at=now))
    else:
        content.status = ContentStatus.REJECTED.value
        content.set_outcome(Rejected(reason=rejection_reason or DEFAULT_REJECTION_REASON))
    content.updated_at = now

    db.commit()
    db.refresh(content)

    logger.info(
        "Content approved" if approved else "Content rejected",
        content_id=content_id,
        approved_by=approved_by,
        status=content.status,
    )
    return content


def update_content(db: Session, content_id: int, fields: Dict[str, Any]) -> Content:
    """
    Apply a partial update.

    ``fields`` must only hold the keys the caller actually sent: a missing key
    leaves the column alone, a key mapped to None clears it. Approval columns
    are not touched here even when ``status`` changes.
    """
    content = require_content(db, content_id)

    for key, value in fields.items():
        if key == "scheduled_at":
            value = as_utc(value)
        setattr(content, key, value)
    content.updated_at = utcnow()

    db.commit()
    db.refresh(content)

    logger.info(
        "Content updated",
        content_id=content_id,
        fields=sorted(fields),
        status=content.status,
    )
    return content


def submit_for_approval(db: Session, content: Content) -> Content:
    """Move content into pending_approval. Caller commits."""
    content.status = ContentStatus.PENDING_APPROVAL.value
    content.updated_at = utcnow()
    db.add(content)
    logger.info("Content submitted for approval", content_id=content.id)
    return content
