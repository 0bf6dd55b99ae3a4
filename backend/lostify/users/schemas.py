"""Pydantic schemas for admin user management endpoints.

password_hash is never part of a response.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class UserSummary(BaseModel):
    """Row in the admin user list."""
    id: UUID
    username: str
    email: str
    is_admin: bool
    enabled: bool
    last_login_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class UserStatusUpdate(BaseModel):
    """Request schema for PUT /admin/users/{id}/status."""
    enabled: bool = Field(..., description="False disables login and rejects existing tokens")


class UserStatusResponse(BaseModel):
    message: str
    user: UserSummary
