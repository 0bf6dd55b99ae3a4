"""Feedback SQLAlchemy model"""

import uuid

from sqlalchemy import Column, Text, DateTime, CheckConstraint, Index, Uuid

from .base import Base, utcnow


class Feedback(Base):
    """A message submitted through the public contact form.

    Admins triage feedback from 'pending' to 'reviewed' or 'resolved'.
    """
    __tablename__ = "feedback"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    subject = Column(Text, nullable=False, default="General Message")
    message = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    resolved_at = Column(DateTime(timezone=True), nullable=True)
    resolved_by = Column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'reviewed', 'resolved')",
            name='ck_feedback_status'
        ),
        Index("idx_feedback_status", "status"),
    )
