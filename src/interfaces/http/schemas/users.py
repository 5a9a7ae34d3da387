from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    dob: date | None = None


class UserResponse(BaseModel):
    """Public view of a user; credentials are never part of it."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str | None
    phone: str | None
    address: str | None
    dob: date | None
    membership_id: UUID | None
    created_at: datetime
