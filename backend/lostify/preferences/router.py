"""Settings endpoints.

Users read and save their own preferences; defaults are returned until the
first save. Admin settings live in a single row that is created on first save.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import CurrentAdmin, CurrentUser
from ..database import get_db
from ..models.settings import AdminSettings, UserSettings
from .schemas import (
    AdminSettingsResponse,
    AdminSettingsSaved,
    AdminSettingsUpdate,
    UserSettingsResponse,
    UserSettingsSaved,
    UserSettingsUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])

ADMIN_SETTINGS_ID = 1


@router.get("", response_model=UserSettingsResponse)
def get_user_settings(current_user: CurrentUser, db: Session = Depends(get_db)):
    """Return the requester's settings, or the defaults if never saved."""
    settings = db.query(UserSettings).filter(UserSettings.user_id == current_user.id).first()
    if settings is None:
        return UserSettingsResponse()
    return settings


@router.put("", response_model=UserSettingsSaved)
def save_user_settings(
    data: UserSettingsUpdate,
    current_user: CurrentUser,
    db: Session = Depends(get_db),
):
    """Create or update the requester's settings."""
    settings = db.query(UserSettings).filter(UserSettings.user_id == current_user.id).first()
    if settings is None:
        settings = UserSettings(user_id=current_user.id, **UserSettingsResponse().model_dump())
        db.add(settings)

    for field, value in data.model_dump(exclude_none=True).items():
        setattr(settings, field, value)

    db.commit()
    db.refresh(settings)

    return UserSettingsSaved(
        message="Settings saved successfully",
        settings=UserSettingsResponse.model_validate(settings),
    )


@router.get("/admin", response_model=AdminSettingsResponse)
def get_admin_settings(admin: CurrentAdmin, db: Session = Depends(get_db)):
    """Return site-wide settings, or the defaults if never saved (ADMIN only)."""
    settings = db.get(AdminSettings, ADMIN_SETTINGS_ID)
    if settings is None:
        return AdminSettingsResponse()
    return settings


@router.put("/admin", response_model=AdminSettingsSaved)
def save_admin_settings(
    data: AdminSettingsUpdate,
    admin: CurrentAdmin,
    db: Session = Depends(get_db),
):
    """Create or update site-wide settings (ADMIN only)."""
    settings = db.get(AdminSettings, ADMIN_SETTINGS_ID)
    if settings is None:
        settings = AdminSettings(id=ADMIN_SETTINGS_ID, **AdminSettingsResponse().model_dump())
        db.add(settings)

    for field, value in data.model_dump(exclude_none=True).items():
        setattr(settings, field, value)

    db.commit()
    db.refresh(settings)

    logger.info(f"Admin settings updated by {admin.username}", extra={"user_id": admin.id})
    return AdminSettingsSaved(
        message="Admin settings saved successfully",
        settings=AdminSettingsResponse.model_validate(settings),
    )
