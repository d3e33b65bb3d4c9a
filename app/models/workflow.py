"""
Workflow models: reusable templates, their ordered steps, and the
per-content instances that track progress through a template.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database import Base
from ..timeutils import utcnow


class WorkflowTemplate(Base):
    __tablename__ = "workflow_templates"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="workflow_templates")
    # Insertion order is the caller's declared order
    steps = relationship(
        "WorkflowStep",
        back_populates="template",
        order_by="WorkflowStep.id",
    )
    instances = relationship("WorkflowInstance", back_populates="template")


class WorkflowStep(Base):
    __tablename__ = "workflow_steps"
    __table_args__ = (UniqueConstraint("workflow_template_id", "step_order"),)

    id = Column(Integer, primary_key=True, index=True)
    workflow_template_id = Column(Integer, ForeignKey("workflow_templates.id"), nullable=False, index=True)
    step_order = Column(Integer, nullable=False)
    step_type = Column(String(20), nullable=False)  # generation, review, approval, scheduling
    required = Column(Boolean, default=True, nullable=False)
    assignee_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    template = relationship("WorkflowTemplate", back_populates="steps")
    assignee = relationship("User", back_populates="assigned_steps")


class WorkflowInstance(Base):
    __tablename__ = "content_workflow_instances"

    id = Column(Integer, primary_key=True, index=True)
    content_id = Column(Integer, ForeignKey("content.id"), nullable=False, index=True)
    workflow_template_id = Column(Integer, ForeignKey("workflow_templates.id"), nullable=False, index=True)
    current_step_id = Column(Integer, ForeignKey("workflow_steps.id"), nullable=True)
    status = Column(String(20), default="in_progress", nullable=False, index=True)  # in_progress, completed, cancelled
    started_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    content = relationship("Content", back_populates="workflow_instances")
    template = relationship("WorkflowTemplate", back_populates="instances")
    current_step = relationship("WorkflowStep")
