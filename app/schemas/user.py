from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime

from ..timeutils import as_utc


class UserCreate(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1)


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_validator("created_at", "updated_at")
    @classmethod
    def utc(cls, value):
        return as_utc(value)
