from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.value_objects.membership_status import MembershipStatus
from src.domain.value_objects.membership_type import MembershipType


class MembershipCreate(BaseModel):
    email: EmailStr
    # Plain string so unknown plans reach the domain check
    type: str
    created_at: date
    payment_date: date
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class MembershipUpdate(BaseModel):
    type: str | None = None
    created_at: date | None = None
    payment_date: date | None = None
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)


class MembershipUserRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID


class MembershipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    type: MembershipType
    created_at: date
    payment_date: date
    price: Decimal
    expiration_date: date
    is_deleted: bool
    status: MembershipStatus
    user: MembershipUserRef


class MembershipBlockedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    blocked: bool
    message: str


class MembershipCreatedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    message: str


class MembershipBlockToggleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    is_deleted: bool
    status: MembershipStatus
    message: str


class MembershipRemovedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    message: str
