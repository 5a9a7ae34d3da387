from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class User:
    id: UUID
    email: str
    hashed_password: str
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    dob: date | None = None
    membership_id: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        email: str,
        hashed_password: str,
        *,
        name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
        dob: date | None = None,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            email=email.lower(),
            hashed_password=hashed_password,
            name=name,
            phone=phone,
            address=address,
            dob=dob,
            membership_id=None,
            created_at=now,
            updated_at=now,
        )

    def as_ref(self) -> UserRef:
        return UserRef(id=self.id)


@dataclass(slots=True, frozen=True)
class UserRef:
    """Identity-only link to a user, as stored on a membership."""

    id: UUID
