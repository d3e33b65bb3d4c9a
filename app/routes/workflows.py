"""
Workflow routes: templates and the instances that run content through them.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from ..database import get_db
from ..schemas.workflow import (
    WorkflowInstanceCreate,
    WorkflowInstanceResponse,
    WorkflowTemplateCreate,
    WorkflowTemplateResponse,
)
from ..services import workflow_instances, workflow_templates

router = APIRouter(prefix="/api/workflows", tags=["workflows"])


@router.post("/templates", response_model=WorkflowTemplateResponse)
def create_template(payload: WorkflowTemplateCreate, db: Session = Depends(get_db)):
    """Create a template together with its steps."""
    return workflow_templates.create_workflow_template(
        db,
        user_id=payload.user_id,
        name=payload.name,
        description=payload.description,
        steps=payload.steps,
    )


@router.get("/templates", response_model=List[WorkflowTemplateResponse])
def get_templates(user_id: int = Query(...), db: Session = Depends(get_db)):
    """Get all templates owned by a user."""
    return workflow_templates.list_workflow_templates(db, user_id)


@router.get("/templates/{template_id}", response_model=Optional[WorkflowTemplateResponse])
def get_template(template_id: int, db: Session = Depends(get_db)):
    """Get a template with its steps, or null when it does not exist."""
    return workflow_templates.get_workflow_template(db, template_id)


@router.post("/instances", response_model=WorkflowInstanceResponse)
def start_workflow(payload: WorkflowInstanceCreate, db: Session = Depends(get_db)):
    """Start running a content item through a template."""
    return workflow_instances.start_workflow(db, payload.content_id, payload.template_id)


@router.get("/instances/{instance_id}", response_model=Optional[WorkflowInstanceResponse])
def get_instance(instance_id: int, db: Session = Depends(get_db)):
    """Get a workflow instance, or null when it does not exist."""
    return workflow_instances.get_workflow_instance(db, instance_id)


@router.post("/instances/{instance_id}/advance", response_model=WorkflowInstanceResponse)
def advance_instance(instance_id: int, db: Session = Depends(get_db)):
    """Complete the current step and move to the next one."""
    return workflow_instances.advance_workflow(db, instance_id)


@router.post("/instances/{instance_id}/cancel", response_model=WorkflowInstanceResponse)
def cancel_instance(instance_id: int, db: Session = Depends(get_db)):
    """Cancel an in-progress workflow."""
    return workflow_instances.cancel_workflow(db, instance_id)
