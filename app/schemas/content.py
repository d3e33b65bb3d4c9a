from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from ..constants import ContentStatus, ContentType, Platform, Tone
from ..timeutils import as_utc


class ContentBase(BaseModel):
    title: str = Field(min_length=1)
    caption: str = Field(min_length=1)
    hashtags: Optional[str] = None
    platform: Platform
    content_type: ContentType

    class Config:
        use_enum_values = True


class ContentCreate(ContentBase):
    user_id: int
    ai_generated: bool = False
    scheduled_at: Optional[datetime] = None


class ContentUpdate(BaseModel):
    """Partial update. Omitted fields are left alone; explicit nulls clear."""
    title: Optional[str] = Field(default=None, min_length=1)
    caption: Optional[str] = Field(default=None, min_length=1)
    hashtags: Optional[str] = None
    platform: Optional[Platform] = None
    content_type: Optional[ContentType] = None
    status: Optional[ContentStatus] = None
    scheduled_at: Optional[datetime] = None
    rejected_reason: Optional[str] = None

    class Config:
        use_enum_values = True

    @field_validator("title", "caption", "platform", "content_type", "status")
    @classmethod
    def not_null(cls, value):
        # Only runs for values the client actually sent
        if value is None:
            raise ValueError("field may be omitted but not set to null")
        return value


class ContentGenerate(BaseModel):
    user_id: int
    prompt: str = Field(min_length=1)
    platform: Platform
    content_type: ContentType
    include_hashtags: bool = True
    tone: Optional[Tone] = None

    class Config:
        use_enum_values = True


class ContentApproval(BaseModel):
    approved_by: int
    approved: bool
    rejection_reason: Optional[str] = None


class ContentSchedule(BaseModel):
    scheduled_at: datetime


class ContentResponse(ContentBase):
    id: int
    user_id: int
    status: ContentStatus
    ai_generated: bool
    scheduled_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    approved_by: Optional[int] = None
    rejected_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        use_enum_values = True

    @field_validator("scheduled_at", "approved_at", "created_at", "updated_at")
    @classmethod
    def utc(cls, value):
        # SQLite drops the offset on read
        return as_utc(value)
