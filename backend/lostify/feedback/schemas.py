"""Pydantic schemas for feedback endpoints."""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

FeedbackStatus = Literal["pending", "reviewed", "resolved"]


class FeedbackCreate(BaseModel):
    """Request schema for the public contact form (POST /feedback)."""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    subject: Optional[str] = Field(None, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)

    @field_validator("name", "message")
    @classmethod
    def check_not_blank(cls, v):
        if v.strip() == "":
            raise ValueError("Field cannot be blank")
        return v.strip()


class FeedbackStatusUpdate(BaseModel):
    """Request schema for PUT /feedback/{id}. Status is case-insensitive."""
    status: FeedbackStatus

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v):
        return v.lower() if isinstance(v, str) else v


class FeedbackResponse(BaseModel):
    id: UUID
    name: str
    email: str
    subject: str
    message: str
    status: str
    created_at: datetime
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None

    class Config:
        from_attributes = True


class FeedbackSubmitted(BaseModel):
    message: str
    id: UUID


class PendingCount(BaseModel):
    count: int
