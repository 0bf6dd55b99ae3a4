"""SQLAlchemy models for Lostify."""

from .base import Base
from .user import User
from .post import Post
from .feedback import Feedback
from .settings import UserSettings, AdminSettings

__all__ = [
    "Base",
    "User",
    "Post",
    "Feedback",
    "UserSettings",
    "AdminSettings",
]
