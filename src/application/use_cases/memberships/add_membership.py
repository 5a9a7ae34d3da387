from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import UserNotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.memberships.common import parse_membership_type
from src.domain.models.membership import Membership

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AddMembershipInput:
    email: str
    type: str
    created_at: date
    payment_date: date
    price: Decimal


@dataclass(slots=True)
class AddMembershipOutput:
    id: UUID
    message: str


async def execute(uow: UnitOfWork, payload: AddMembershipInput) -> AddMembershipOutput:
    """Purchase a membership for the user registered under ``payload.email``.

    The membership insert and the user's reference update are committed
    together; any failure rolls both back.
    """
    membership_type = parse_membership_type(payload.type)
    if payload.price < 0:
        raise ValidationError("Price must be non-negative")

    user = await uow.users.get_by_email(payload.email)
    if not user:
        raise UserNotFound(f"No user registered with email {payload.email}")

    membership = Membership.create(
        user=user.as_ref(),
        type=membership_type,
        created_at=payload.created_at,
        payment_date=payload.payment_date,
        price=payload.price,
    )
    created = await uow.memberships.add(membership)
    await uow.users.set_membership(user.id, created.id)
    await uow.commit()

    logger.info(
        "Membership %s (%s) created for user %s, expires %s",
        created.id,
        created.type.value,
        user.id,
        created.expiration_date.isoformat(),
    )
    return AddMembershipOutput(id=created.id, message=f"Membership purchased, id {created.id}")
