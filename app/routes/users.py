"""
User routes for registering content owners and reviewers.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..schemas.user import UserCreate, UserResponse
from ..services import users as user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    """Create a user. Duplicate emails are rejected by the store (409)."""
    return user_service.create_user(db, email=payload.email, name=payload.name)


@router.get("", response_model=List[UserResponse])
def get_users(db: Session = Depends(get_db)):
    """List all users."""
    return user_service.list_users(db)
