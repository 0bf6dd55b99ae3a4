"""Account helpers shared by the auth endpoints and the seed script."""

import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..config import Settings
from ..models.user import User
from .password import hash_password
from .roles import UserRole

logger = logging.getLogger(__name__)


def email_in_domain(email: str, domain: str) -> bool:
    """True when `email` belongs to `domain` (case-insensitive, exact domain)."""
    return email.lower().rsplit("@", 1)[-1] == domain.lower().lstrip("@")


def find_user_by_login(db: Session, login: str) -> Optional[User]:
    """Look up a user by username or email."""
    return db.query(User).filter(
        or_(User.username == login, User.email == login.lower())
    ).first()


def seed_admin_user(db: Session, settings: Settings) -> Optional[User]:
    """Create the configured admin account if it does not exist yet.

    Returns:
        The newly created admin, or None when nothing was created
    """
    if not settings.admin_configured:
        logger.warning(
            "Admin credentials not configured; set ADMIN_USERNAME, ADMIN_EMAIL "
            "and ADMIN_PASSWORD to seed an admin account"
        )
        return None

    existing = db.query(User).filter(
        or_(User.username == settings.ADMIN_USERNAME, User.email == settings.ADMIN_EMAIL.lower())
    ).first()
    if existing:
        return None

    admin = User(
        username=settings.ADMIN_USERNAME,
        email=settings.ADMIN_EMAIL,
        password_hash=hash_password(settings.ADMIN_PASSWORD),
        role=UserRole.ADMIN.value,
        status="ACTIVE",
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)

    logger.info(f"Admin user created: {admin.username}", extra={"user_id": admin.id})
    return admin
