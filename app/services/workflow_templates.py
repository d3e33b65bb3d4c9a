"""
Workflow template engine.

A template is a named, ordered set of steps (generation, review, approval,
scheduling). Step orders must form 1..N once sorted; callers may send them
in any order and the declared order is what gets stored and returned.
"""
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session, selectinload

from ..exceptions import ValidationError
from ..logging_config import get_logger
from ..models.workflow import WorkflowStep, WorkflowTemplate
from ..schemas.workflow import WorkflowStepCreate
from .users import require_user

logger = get_logger("workflows")


def validate_step_orders(step_orders: Sequence[int]) -> None:
    """Require the sorted step orders to be exactly 1..N."""
    expected = list(range(1, len(step_orders) + 1))
    if sorted(step_orders) != expected:
        raise ValidationError(
            "Step orders must be consecutive starting from 1 (non-contiguous step order)",
            {"step_orders": list(step_orders)},
        )


def create_workflow_template(
    db: Session,
    user_id: int,
    name: str,
    steps: List[WorkflowStepCreate],
    description: Optional[str] = None,
) -> WorkflowTemplate:
    require_user(db, user_id)
    validate_step_orders([step.step_order for step in steps])

    for assignee_id in dict.fromkeys(s.assignee_id for s in steps if s.assignee_id is not None):
        require_user(db, assignee_id, resource="Assignee")

    template = WorkflowTemplate(
        user_id=user_id,
        name=name,
        description=description,
        is_active=True,
    )
    try:
        db.add(template)
        db.flush()
        db.add_all([
            WorkflowStep(
                workflow_template_id=template.id,
                step_order=step.step_order,
                step_type=step.step_type,
                required=step.required,
                assignee_id=step.assignee_id,
            )
            for step in steps
        ])
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(template)

    logger.info(
        "Workflow template created",
        template_id=template.id,
        user_id=user_id,
        step_count=len(steps),
    )
    return template


def list_workflow_templates(db: Session, user_id: int) -> List[WorkflowTemplate]:
    return (
        db.query(WorkflowTemplate)
        .options(selectinload(WorkflowTemplate.steps))
        .filter(WorkflowTemplate.user_id == user_id)
        .order_by(WorkflowTemplate.id)
        .all()
    )


def get_workflow_template(db: Session, template_id: int) -> Optional[WorkflowTemplate]:
    return (
        db.query(WorkflowTemplate)
        .options(selectinload(WorkflowTemplate.steps))
        .filter(WorkflowTemplate.id == template_id)
        .first()
    )
