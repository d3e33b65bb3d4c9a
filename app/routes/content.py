"""
Content routes: creation, generation, edits and lifecycle transitions.
"""
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from typing import List, Optional

from ..config import get_settings
from ..database import get_db
from ..limiter import limiter
from ..schemas.content import (
    ContentApproval,
    ContentCreate,
    ContentGenerate,
    ContentResponse,
    ContentSchedule,
    ContentUpdate,
)
from ..schemas.workflow import WorkflowInstanceResponse
from ..services import content as content_service
from ..services import generation, lifecycle, scheduling, workflow_instances

settings = get_settings()

router = APIRouter(prefix="/api/content", tags=["content"])


@router.post("", response_model=ContentResponse)
def create_content(payload: ContentCreate, db: Session = Depends(get_db)):
    """Create a draft written by a user."""
    return content_service.create_content(db, payload)


@router.post("/generate", response_model=ContentResponse)
@limiter.limit(settings.generation_rate_limit)
def generate_content(
    request: Request,
    payload: ContentGenerate,
    db: Session = Depends(get_db),
):
    """Generate a draft from a prompt."""
    return generation.generate_content(
        db,
        user_id=payload.user_id,
        prompt=payload.prompt,
        platform=payload.platform,
        content_type=payload.content_type,
        include_hashtags=payload.include_hashtags,
        tone=payload.tone,
    )


@router.get("", response_model=List[ContentResponse])
def get_content(user_id: int = Query(...), db: Session = Depends(get_db)):
    """Get all content owned by a user, newest first."""
    return content_service.list_content(db, user_id)


@router.get("/{content_id}", response_model=Optional[ContentResponse])
def get_content_by_id(content_id: int, db: Session = Depends(get_db)):
    """Get a single content item, or null when it does not exist."""
    return content_service.get_content(db, content_id)


@router.patch("/{content_id}", response_model=ContentResponse)
def update_content(
    content_id: int,
    update: ContentUpdate,
    db: Session = Depends(get_db),
):
    """Apply only the fields present in the request body."""
    return lifecycle.update_content(db, content_id, update.model_dump(exclude_unset=True))


@router.post("/{content_id}/approval", response_model=ContentResponse)
def approve_content(
    content_id: int,
    decision: ContentApproval,
    db: Session = Depends(get_db),
):
    """Approve or reject content."""
    return lifecycle.approve_content(
        db,
        content_id,
        approved_by=decision.approved_by,
        approved=decision.approved,
        rejection_reason=decision.rejection_reason,
    )


@router.post("/{content_id}/schedule", response_model=ContentResponse)
def schedule_content(
    content_id: int,
    payload: ContentSchedule,
    db: Session = Depends(get_db),
):
    """Schedule approved content for a future time."""
    return scheduling.schedule_content(db, content_id, payload.scheduled_at)


@router.post("/{content_id}/unschedule", response_model=ContentResponse)
def unschedule_content(content_id: int, db: Session = Depends(get_db)):
    """Take scheduled content off the calendar."""
    return scheduling.unschedule_content(db, content_id)


@router.get("/{content_id}/workflows", response_model=List[WorkflowInstanceResponse])
def get_content_workflows(content_id: int, db: Session = Depends(get_db)):
    """List workflow instances started for a content item."""
    return workflow_instances.list_workflow_instances(db, content_id)
