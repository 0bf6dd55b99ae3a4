"""Pydantic schemas for settings endpoints."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class UserSettingsResponse(BaseModel):
    default_post_type: Literal["lost", "found"] = "lost"
    contact_visibility: Literal["public", "private"] = "public"
    whatsapp_prefix: bool = True
    auto_resolve: bool = False

    class Config:
        from_attributes = True


class UserSettingsUpdate(BaseModel):
    """Request schema for PUT /settings. Omitted fields keep their value."""
    default_post_type: Optional[Literal["lost", "found"]] = None
    contact_visibility: Optional[Literal["public", "private"]] = None
    whatsapp_prefix: Optional[bool] = None
    auto_resolve: Optional[bool] = None


class AdminSettingsResponse(BaseModel):
    moderation_threshold: int = 3
    require_manual_approval: bool = False
    announcement_banner: str = ""

    class Config:
        from_attributes = True


class AdminSettingsUpdate(BaseModel):
    """Request schema for PUT /settings/admin. Omitted fields keep their value."""
    moderation_threshold: Optional[int] = Field(None, ge=1, le=100)
    require_manual_approval: Optional[bool] = None
    announcement_banner: Optional[str] = Field(None, max_length=500)


class UserSettingsSaved(BaseModel):
    message: str
    settings: UserSettingsResponse


class AdminSettingsSaved(BaseModel):
    message: str
    settings: AdminSettingsResponse
