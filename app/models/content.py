"""
Content model for social media posts moving through review and scheduling.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base
from ..timeutils import utcnow


@dataclass(frozen=True)
class Approved:
    by: int
    at: datetime


@dataclass(frozen=True)
class Rejected:
    reason: str


@dataclass(frozen=True)
class Pending:
    pass


ApprovalOutcome = Union[Approved, Rejected, Pending]


class Content(Base):
    __tablename__ = "content"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    caption = Column(Text, nullable=False)
    hashtags = Column(Text, nullable=True)
    platform = Column(String(20), nullable=False)  # instagram, facebook, twitter, linkedin
    content_type = Column(String(20), nullable=False)  # post, story, reel, tweet
    status = Column(String(20), default="draft", nullable=False, index=True)
    ai_generated = Column(Boolean, default=False, nullable=False)
    scheduled_at = Column(DateTime(timezone=True), nullable=True, index=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    approved_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    rejected_reason = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="content", foreign_keys=[user_id])
    approver = relationship("User", foreign_keys=[approved_by])
    workflow_instances = relationship("WorkflowInstance", back_populates="content")

    @property
    def approval_outcome(self) -> ApprovalOutcome:
        if self.approved_by is not None and self.approved_at is not None:
            return Approved(by=self.approved_by, at=self.approved_at)
        if self.rejected_reason is not None:
            return Rejected(reason=self.rejected_reason)
        return Pending()

    def set_outcome(self, outcome: ApprovalOutcome) -> None:
        """Write an approval outcome, clearing the fields of the other variants."""
        approved_by: Optional[int] = None
        approved_at: Optional[datetime] = None
        rejected_reason: Optional[str] = None

        if isinstance(outcome, Approved):
            approved_by, approved_at = outcome.by, outcome.at
        elif isinstance(outcome, Rejected):
            rejected_reason = outcome.reason

        self.approved_by = approved_by
        self.approved_at = approved_at
        self.rejected_reason = rejected_reason
