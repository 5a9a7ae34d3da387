from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.models.user import UserRef
from src.domain.value_objects.membership_status import MembershipStatus
from src.domain.value_objects.membership_type import MembershipType


def compute_expiration_date(membership_type: MembershipType | str, created_at: date) -> date:
    """Return the date a membership of ``membership_type`` bought on ``created_at`` lapses.

    Month-end dates clamp to the last day of the target month
    (2024-01-31 + 1 month -> 2024-02-29). Unknown types raise ValueError;
    the application layer maps that to InvalidMembershipType in
    ``use_cases/memberships/common.py``.
    """
    kind = MembershipType(membership_type)
    return created_at + kind.term()


@dataclass(slots=True)
class Membership:
    id: UUID
    user: UserRef
    type: MembershipType
    created_at: date
    payment_date: date
    price: Decimal
    expiration_date: date
    is_deleted: bool = False
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        *,
        user: UserRef,
        type: MembershipType,
        created_at: date,
        payment_date: date,
        price: Decimal,
    ) -> Membership:
        return cls(
            id=uuid4(),
            user=user,
            type=type,
            created_at=created_at,
            payment_date=payment_date,
            price=price,
            expiration_date=compute_expiration_date(type, created_at),
            is_deleted=False,
            updated_at=datetime.now(timezone.utc),
            version=1,
        )

    @property
    def status(self) -> MembershipStatus:
        return MembershipStatus.from_flag(self.is_deleted)
