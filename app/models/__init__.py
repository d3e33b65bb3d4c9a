from .user import User
from .content import Content, Approved, Rejected, Pending, ApprovalOutcome
from .workflow import WorkflowTemplate, WorkflowStep, WorkflowInstance

__all__ = [
    "User",
    "Content",
    "Approved",
    "Rejected",
    "Pending",
    "ApprovalOutcome",
    "WorkflowTemplate",
    "WorkflowStep",
    "WorkflowInstance",
]
