"""
User model for content ownership and review assignment.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from ..database import Base
from ..timeutils import utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    content = relationship(
        "Content",
        back_populates="user",
        foreign_keys="Content.user_id",
    )
    workflow_templates = relationship("WorkflowTemplate", back_populates="user")
    assigned_steps = relationship("WorkflowStep", back_populates="assignee")
