from __future__ import annotations

from datetime import date

from src.application.errors import InvalidMembershipType
from src.domain.models.membership import compute_expiration_date
from src.domain.value_objects.membership_type import MembershipType


def parse_membership_type(value: MembershipType | str) -> MembershipType:
    try:
        return MembershipType(value)
    except ValueError as exc:
        raise InvalidMembershipType(
            f"Invalid membership type: {value}",
            details={"allowed": [t.value for t in MembershipType]},
        ) from exc


def expiration_for(value: MembershipType | str, created_at: date) -> tuple[MembershipType, date]:
    membership_type = parse_membership_type(value)
    return membership_type, compute_expiration_date(membership_type, created_at)
