"""
Content creation and lookup.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from ..constants import ContentStatus
from ..exceptions import NotFoundError
from ..logging_config import get_logger
from ..models.content import Content
from ..schemas.content import ContentCreate
from ..timeutils import as_utc
from .users import require_user

logger = get_logger("content")


def require_content(db: Session, content_id: int) -> Content:
    content = db.get(Content, content_id)
    if content is None:
        raise NotFoundError("Content", content_id)
    return content


def create_content(db: Session, data: ContentCreate) -> Content:
    """Persist a manually written draft for an existing user."""
    require_user(db, data.user_id)

    content = Content(
        user_id=data.user_id,
        title=data.title,
        caption=data.caption,
        hashtags=data.hashtags,
        platform=data.platform,
        content_type=data.content_type,
        status=ContentStatus.DRAFT.value,
        ai_generated=data.ai_generated,
        scheduled_at=as_utc(data.scheduled_at),
    )
    db.add(content)
    db.commit()
    db.refresh(content)

    logger.info("Content created", content_id=content.id, user_id=content.user_id)
    return content


def list_content(db: Session, user_id: int) -> List[Content]:
    return (
        db.query(Content)
        .filter(Content.user_id == user_id)
        .order_by(Content.created_at.desc(), Content.id.desc())
        .all()
    )


def get_content(db: Session, content_id: int) -> Optional[Content]:
    return db.get(Content, content_id)
