"""
User registration and lookup.
"""
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError
from ..logging_config import get_logger
from ..models.user import User

logger = get_logger("users")


def require_user(db: Session, user_id: int, resource: str = "User") -> User:
    """Return the user or raise NotFoundError naming ``resource``."""
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(resource, user_id)
    return user


def create_user(db: Session, email: str, name: str) -> User:
    user = User(email=email, name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("User creation rejected by store", email=email)
        raise
    db.refresh(user)
    logger.info("User created", user_id=user.id)
    return user


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()
