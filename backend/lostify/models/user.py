"""User SQLAlchemy model"""

import re
import uuid

from sqlalchemy import Column, Text, DateTime, CheckConstraint, Uuid
from sqlalchemy.orm import relationship, validates

from .base import Base, utcnow


class User(Base):
    """User model representing an authenticated campus member or admin.

    Passwords are hashed using Argon2id. Disabled users cannot log in and
    their tokens are rejected.
    """
    __tablename__ = "user"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(Text, nullable=False, unique=True)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    role = Column(Text, nullable=False, default="USER")
    status = Column(Text, nullable=False, default="ACTIVE")
    last_login_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    posts = relationship("Post", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True)
    settings = relationship("UserSettings", back_populates="user", uselist=False, cascade="all, delete-orphan")

    # Constraints
    __table_args__ = (
        CheckConstraint(
            "role IN ('USER', 'ADMIN')",
            name='ck_user_role'
        ),
        CheckConstraint(
            "status IN ('ACTIVE', 'DISABLED')",
            name='ck_user_status'
        ),
    )

    @validates('email')
    def validate_email(self, key, value):
        """Basic email format validation"""
        if not re.match(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$', value):
            raise ValueError("Invalid email format")
        return value.lower()

    @property
    def is_admin(self) -> bool:
        return self.role == "ADMIN"

    @property
    def enabled(self) -> bool:
        return self.status == "ACTIVE"

