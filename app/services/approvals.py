"""
Approval gate: the review queue of a single approver.
"""
from typing import List

from sqlalchemy.orm import Session

from ..constants import ContentStatus, InstanceStatus, StepType
from ..logging_config import db_logger, timed
from ..models.content import Content
from ..models.workflow import WorkflowInstance, WorkflowStep


@timed(db_logger)
def get_pending_approvals(db: Session, user_id: int) -> List[Content]:
    """
    Content waiting on ``user_id``.

    A content item qualifies only when it is pending_approval and its
    in_progress workflow instance currently sits on an approval step assigned
    to the user. Newest content first.
    """
    return (
        db.query(Content)
        .join(WorkflowInstance, WorkflowInstance.content_id == Content.id)
        .join(WorkflowStep, WorkflowStep.id == WorkflowInstance.current_step_id)
        .filter(
            Content.status == ContentStatus.PENDING_APPROVAL.value,
            WorkflowInstance.status == InstanceStatus.IN_PROGRESS.value,
            WorkflowStep.step_type == StepType.APPROVAL.value,
            WorkflowStep.assignee_id == user_id,
        )
        .distinct()
        .order_by(Content.created_at.desc(), Content.id.desc())
        .all()
    )
