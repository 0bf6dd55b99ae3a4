"""User management endpoints (ADMIN only).

Admins can list every account and enable or disable it. A disabled user
cannot log in, and requests carrying their existing tokens are rejected.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..auth.dependencies import CurrentAdmin
from ..database import get_db
from ..models.user import User
from .schemas import UserStatusResponse, UserStatusUpdate, UserSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/users", tags=["User Management"])


@router.get(
    "",
    response_model=List[UserSummary],
    summary="List users (ADMIN only)",
)
def list_users(admin: CurrentAdmin, db: Session = Depends(get_db)):
    """Return all users ordered by signup time."""
    return db.query(User).order_by(User.created_at.asc()).all()


@router.put(
    "/{user_id}/status",
    response_model=UserStatusResponse,
    summary="Enable or disable a user (ADMIN only)",
)
def update_user_status(
    user_id: UUID,
    data: UserStatusUpdate,
    admin: CurrentAdmin,
    db: Session = Depends(get_db),
):
    """Enable or disable an account.

    Raises:
        HTTPException 400: Admin tried to disable their own account
        HTTPException 404: User not found
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    if user.id == admin.id and not data.enabled:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot disable your own account"
        )

    user.status = "ACTIVE" if data.enabled else "DISABLED"
    db.commit()
    db.refresh(user)

    logger.info(
        f"User {user.username} {'enabled' if data.enabled else 'disabled'} by {admin.username}",
        extra={"user_id": user.id}
    )
    return UserStatusResponse(
        message="User status updated successfully",
        user=UserSummary.model_validate(user),
    )
