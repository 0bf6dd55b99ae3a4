"""Pydantic schemas for authentication endpoints"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class SignupRequest(BaseModel):
    """Request schema for account creation.

    The email must belong to the institutional domain configured in
    ALLOWED_EMAIL_DOMAIN.
    """
    username: str = Field(..., min_length=3, max_length=50, pattern=r"^[A-Za-z0-9._-]+$")
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Request schema for login. `username` may also be the account email."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """User information response (excludes password_hash)."""
    id: UUID
    username: str
    email: str
    role: str
    is_admin: bool
    enabled: bool
    last_login_at: Optional[datetime] = None
    created_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Response schema for successful signup or login."""
    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
