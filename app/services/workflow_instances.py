"""
Workflow instance tracker.

Binds a content item to a template and walks it through the template's
steps in step_order. A content item has at most one in_progress instance at
a time; entering an approval step puts the content into pending_approval so
the assigned reviewer sees it in their queue.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from ..constants import InstanceStatus, StepType
from ..exceptions import NotFoundError, PreconditionFailedError
from ..logging_config import get_logger
from ..models.content import Content
from ..models.workflow import WorkflowInstance, WorkflowStep, WorkflowTemplate
from ..timeutils import utcnow
from .content import require_content
from .lifecycle import submit_for_approval

logger = get_logger("workflows")


def _require_instance(db: Session, instance_id: int) -> WorkflowInstance:
    instance = db.get(WorkflowInstance, instance_id)
    if instance is None:
        raise NotFoundError("Workflow instance", instance_id)
    return instance


def _require_in_progress(instance: WorkflowInstance) -> None:
    if instance.status != InstanceStatus.IN_PROGRESS.value:
        raise PreconditionFailedError(
            "Only in-progress workflows can be changed",
            {"instance_id": instance.id, "status": instance.status},
        )


def _next_step(db: Session, template_id: int, after_order: int = 0) -> Optional[WorkflowStep]:
    return (
        db.query(WorkflowStep)
        .filter(
            WorkflowStep.workflow_template_id == template_id,
            WorkflowStep.step_order > after_order,
        )
        .order_by(WorkflowStep.step_order)
        .first()
    )


def _enter_step(db: Session, instance: WorkflowInstance, content: Content, step: Optional[WorkflowStep]) -> None:
    if step is None:
        instance.current_step_id = None
        instance.status = InstanceStatus.COMPLETED.value
        instance.completed_at = utcnow()
        return

    instance.current_step_id = step.id
    if step.step_type == StepType.APPROVAL.value:
        submit_for_approval(db, content)


def start_workflow(db: Session, content_id: int, template_id: int) -> WorkflowInstance:
    content = require_content(db, content_id)
    template = db.get(WorkflowTemplate, template_id)
    if template is None:
        raise NotFoundError("Workflow template", template_id)
    if not template.is_active:
        raise PreconditionFailedError(
            "Workflow template is not active",
            {"template_id": template_id},
        )

    active = (
        db.query(WorkflowInstance)
        .filter(
            WorkflowInstance.content_id == content_id,
            WorkflowInstance.status == InstanceStatus.IN_PROGRESS.value,
        )
        .first()
    )
    if active is not None:
        raise PreconditionFailedError(
            "Content already has a workflow in progress",
            {"content_id": content_id, "instance_id": active.id},
        )

    instance = WorkflowInstance(
        content_id=content_id,
        workflow_template_id=template_id,
        status=InstanceStatus.IN_PROGRESS.value,
        started_at=utcnow(),
    )
    db.add(instance)
    _enter_step(db, instance, content, _next_step(db, template_id))
    db.commit()
    db.refresh(instance)

    logger.info(
        "Workflow started",
        instance_id=instance.id,
        content_id=content_id,
        template_id=template_id,
        current_step_id=instance.current_step_id,
        status=instance.status,
    )
    return instance


def advance_workflow(db: Session, instance_id: int) -> WorkflowInstance:
    """Complete the current step and move to the next one by step_order."""
    instance = _require_instance(db, instance_id)
    _require_in_progress(instance)

    current_order = instance.current_step.step_order if instance.current_step else 0
    step = _next_step(db, instance.workflow_template_id, current_order)
    _enter_step(db, instance, instance.content, step)
    db.commit()
    db.refresh(instance)

    logger.info(
        "Workflow advanced",
        instance_id=instance_id,
        current_step_id=instance.current_step_id,
        status=instance.status,
    )
    return instance


def cancel_workflow(db: Session, instance_id: int) -> WorkflowInstance:
    instance = _require_instance(db, instance_id)
    _require_in_progress(instance)

    instance.status = InstanceStatus.CANCELLED.value
    instance.completed_at = utcnow()
    db.commit()
    db.refresh(instance)

    logger.info("Workflow cancelled", instance_id=instance_id)
    return instance


def get_workflow_instance(db: Session, instance_id: int) -> Optional[WorkflowInstance]:
    return db.get(WorkflowInstance, instance_id)


def list_workflow_instances(db: Session, content_id: int) -> List[WorkflowInstance]:
    return (
        db.query(WorkflowInstance)
        .filter(WorkflowInstance.content_id == content_id)
        .order_by(WorkflowInstance.started_at.desc(), WorkflowInstance.id.desc())
        .all()
    )
