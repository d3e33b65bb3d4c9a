from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import List, Optional

from ..constants import InstanceStatus, StepType
from ..timeutils import as_utc


class WorkflowStepBase(BaseModel):
    step_order: int = Field(ge=1)
    step_type: StepType
    required: bool
    assignee_id: Optional[int] = None

    class Config:
        use_enum_values = True


class WorkflowStepCreate(WorkflowStepBase):
    pass


class WorkflowStepResponse(WorkflowStepBase):
    id: int

    class Config:
        from_attributes = True
        use_enum_values = True


class WorkflowTemplateCreate(BaseModel):
    user_id: int
    name: str = Field(min_length=1)
    description: Optional[str] = None
    steps: List[WorkflowStepCreate]


class WorkflowTemplateResponse(BaseModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    steps: List[WorkflowStepResponse] = []
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_validator("created_at", "updated_at")
    @classmethod
    def utc(cls, value):
        return as_utc(value)


class WorkflowInstanceCreate(BaseModel):
    content_id: int
    template_id: int


class WorkflowInstanceResponse(BaseModel):
    id: int
    content_id: int
    workflow_template_id: int
    current_step_id: Optional[int] = None
    current_step: Optional[WorkflowStepResponse] = None
    status: InstanceStatus
    started_at: datetime
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        use_enum_values = True

    @field_validator("started_at", "completed_at")
    @classmethod
    def utc(cls, value):
        return as_utc(value)
