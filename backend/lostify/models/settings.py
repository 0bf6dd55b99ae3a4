"""Per-user and site-wide settings SQLAlchemy models"""

import uuid

from sqlalchemy import Column, Text, Integer, Boolean, DateTime, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class UserSettings(Base):
    """Display and posting preferences, one row per user."""
    __tablename__ = "user_settings"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("user.id", ondelete="CASCADE"), nullable=False, unique=True)
    default_post_type = Column(Text, nullable=False, default="lost")
    contact_visibility = Column(Text, nullable=False, default="public")
    whatsapp_prefix = Column(Boolean, nullable=False, default=True)
    auto_resolve = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="settings")

    __table_args__ = (
        CheckConstraint(
            "default_post_type IN ('lost', 'found')",
            name='ck_user_settings_post_type'
        ),
        CheckConstraint(
            "contact_visibility IN ('public', 'private')",
            name='ck_user_settings_visibility'
        ),
    )


class AdminSettings(Base):
    """Site-wide moderation settings. Singleton row with id 1."""
    __tablename__ = "admin_settings"

    id = Column(Integer, primary_key=True, default=1)
    moderation_threshold = Column(Integer, nullable=False, default=3)
    require_manual_approval = Column(Boolean, nullable=False, default=False)
    announcement_banner = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("id = 1", name='ck_admin_settings_singleton'),
    )
