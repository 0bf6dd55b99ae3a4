"""Post SQLAlchemy model"""

import uuid

from sqlalchemy import Column, Text, Date, DateTime, Boolean, ForeignKey, CheckConstraint, Index, Uuid
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class Post(Base):
    """A lost or found item reported by a user.

    Only posts with status 'active' take part in matching. Admins may flag
    posts and attach moderation notes.
    """
    __tablename__ = "post"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    contact_info = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    owner_id = Column(Uuid(as_uuid=True), ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    image_url = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default="active")
    flagged = Column(Boolean, nullable=False, default=False)
    admin_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("User", back_populates="posts")

    # Constraints
    __table_args__ = (
        CheckConstraint(
            "type IN ('lost', 'found')",
            name='ck_post_type'
        ),
        CheckConstraint(
            "status IN ('active', 'resolved', 'flagged')",
            name='ck_post_status'
        ),
        Index("idx_post_owner", "owner_id"),
        Index("idx_post_status", "status"),
        Index("idx_post_type", "type"),
    )

    @property
    def username(self):
        return self.owner.username if self.owner else None
