"""Pydantic schemas for post endpoints."""

import datetime as dt
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

PostTypeLiteral = Literal["lost", "found"]


def ensure_not_in_future(value: Optional[dt.date]) -> Optional[dt.date]:
    """Reject item dates after today."""
    if value is not None and value > dt.date.today():
        raise ValueError("Please select a valid date - future dates are not allowed.")
    return value


class PostCreate(BaseModel):
    """Request schema for creating a post (POST /posts)."""
    title: str = Field(..., min_length=1, max_length=200, examples=["Black Wallet"])
    description: str = Field("", max_length=5000)
    type: PostTypeLiteral
    category: str = Field(..., min_length=1, max_length=100, examples=["Wallets"])
    location: str = Field(..., min_length=1, max_length=200, examples=["Gym"])
    date: Optional[dt.date] = Field(None, description="Date the item was lost or found (defaults to today)")
    contact_info: str = Field(..., min_length=1, max_length=50, examples=["+91 98765 43210"])
    image_url: Optional[str] = Field(None, max_length=2048)

    @field_validator("title", "category", "location", "contact_info")
    @classmethod
    def check_not_blank(cls, v):
        """Required text fields must contain more than whitespace."""
        if v.strip() == "":
            raise ValueError("Field cannot be blank")
        return v.strip()

    @field_validator("date")
    @classmethod
    def check_date(cls, v):
        return ensure_not_in_future(v)


class PostUpdate(BaseModel):
    """Request schema for an owner's update (PUT /posts/{id}). All fields optional."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    type: Optional[PostTypeLiteral] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    date: Optional[dt.date] = None
    contact_info: Optional[str] = Field(None, min_length=1, max_length=50)
    image_url: Optional[str] = Field(None, max_length=2048)
    status: Optional[Literal["active", "resolved"]] = None

    @field_validator("title", "category", "location", "contact_info")
    @classmethod
    def check_not_blank(cls, v):
        if v is None:
            return v
        if v.strip() == "":
            raise ValueError("Field cannot be blank")
        return v.strip()

    @field_validator("date")
    @classmethod
    def check_date(cls, v):
        return ensure_not_in_future(v)


class AdminPostUpdate(PostUpdate):
    """Request schema for moderation (PATCH /posts/admin/{id})."""
    status: Optional[Literal["active", "resolved", "flagged"]] = None
    flagged: Optional[bool] = None
    admin_notes: Optional[str] = Field(None, max_length=2000)


class PostResponse(BaseModel):
    """Public representation of a post."""
    id: UUID
    title: str
    description: str
    type: str
    category: str
    location: str
    date: dt.date
    contact_info: str
    image_url: Optional[str] = None
    status: str
    flagged: bool
    owner_id: UUID
    username: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class AdminPostResponse(PostResponse):
    """Post representation for admins, including moderation notes."""
    admin_notes: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
