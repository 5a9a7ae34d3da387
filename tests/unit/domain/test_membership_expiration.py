from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from src.application.errors import InvalidMembershipType
from src.application.use_cases.memberships.common import expiration_for, parse_membership_type
from src.domain.models.membership import Membership, compute_expiration_date
from src.domain.models.user import UserRef
from src.domain.value_objects.membership_status import MembershipStatus
from src.domain.value_objects.membership_type import MembershipType


@pytest.mark.parametrize(
    ("membership_type", "created_at", "expected"),
    [
        (MembershipType.MONTHLY_MEMBER, date(2024, 3, 15), date(2024, 4, 15)),
        (MembershipType.ANNUAL_MEMBER, date(2024, 3, 15), date(2025, 3, 15)),
        (MembershipType.CREATOR, date(2024, 3, 15), date(2024, 5, 15)),
        (MembershipType.MONTHLY_MEMBER, date(2023, 12, 20), date(2024, 1, 20)),
        (MembershipType.CREATOR, date(2023, 11, 30), date(2024, 1, 30)),
    ],
)
def test_expiration_adds_plan_term(membership_type, created_at, expected):
    assert compute_expiration_date(membership_type, created_at) == expected


@pytest.mark.parametrize(
    ("membership_type", "created_at", "expected"),
    [
        (MembershipType.MONTHLY_MEMBER, date(2024, 1, 31), date(2024, 2, 29)),
        (MembershipType.MONTHLY_MEMBER, date(2023, 1, 31), date(2023, 2, 28)),
        (MembershipType.MONTHLY_MEMBER, date(2024, 3, 31), date(2024, 4, 30)),
        (MembershipType.ANNUAL_MEMBER, date(2024, 2, 29), date(2025, 2, 28)),
        (MembershipType.CREATOR, date(2023, 12, 31), date(2024, 2, 29)),
    ],
)
def test_expiration_clamps_to_end_of_month(membership_type, created_at, expected):
    assert compute_expiration_date(membership_type, created_at) == expected


def test_expiration_accepts_raw_type_value():
    assert compute_expiration_date("AnnualMember", date(2023, 5, 10)) == date(2024, 5, 10)


def test_expiration_rejects_unknown_type():
    with pytest.raises(ValueError):
        compute_expiration_date("LifetimeMember", date(2024, 1, 1))


def test_parse_membership_type_raises_invalid_membership_type():
    with pytest.raises(InvalidMembershipType) as exc_info:
        parse_membership_type("Weekly")
    assert exc_info.value.status_code == 422
    assert "MonthlyMember" in exc_info.value.details["allowed"]
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_expiration_for_returns_parsed_type():
    kind, expiration = expiration_for("Creator", date(2024, 6, 1))
    assert kind is MembershipType.CREATOR
    assert expiration == date(2024, 8, 1)


def test_create_membership_derives_expiration_and_starts_active():
    membership = Membership.create(
        user=UserRef(id=uuid4()),
        type=MembershipType.MONTHLY_MEMBER,
        created_at=date(2024, 1, 31),
        payment_date=date(2024, 1, 31),
        price=Decimal("19.99"),
    )
    assert membership.expiration_date == date(2024, 2, 29)
    assert membership.is_deleted is False
    assert membership.status is MembershipStatus.ACTIVE
    assert membership.version == 1

    membership.is_deleted = True
    assert membership.status is MembershipStatus.BLOCKED
