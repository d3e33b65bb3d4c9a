from .user import UserCreate, UserResponse
from .content import (
    ContentCreate, ContentUpdate, ContentGenerate,
    ContentApproval, ContentSchedule, ContentResponse,
)
from .workflow import (
    WorkflowStepCreate, WorkflowStepResponse,
    WorkflowTemplateCreate, WorkflowTemplateResponse,
    WorkflowInstanceCreate, WorkflowInstanceResponse,
)
from .analytics import ContentAnalytics

__all__ = [
    "UserCreate", "UserResponse",
    "ContentCreate", "ContentUpdate", "ContentGenerate",
    "ContentApproval", "ContentSchedule", "ContentResponse",
    "WorkflowStepCreate", "WorkflowStepResponse",
    "WorkflowTemplateCreate", "WorkflowTemplateResponse",
    "WorkflowInstanceCreate", "WorkflowInstanceResponse",
    "ContentAnalytics",
]
