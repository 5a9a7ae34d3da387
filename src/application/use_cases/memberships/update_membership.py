from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, OperationFailed, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.memberships.common import expiration_for
from src.domain.models.membership import Membership


@dataclass(slots=True)
class UpdateMembershipInput:
    type: str | None = None
    created_at: date | None = None
    payment_date: date | None = None
    price: Decimal | None = None


async def execute(
    uow: UnitOfWork,
    membership_id: UUID,
    payload: UpdateMembershipInput,
) -> Membership:
    existing = await uow.memberships.get(membership_id)
    if not existing:
        raise NotFound(f"Membership {membership_id} not found")
    if payload.price is not None and payload.price < 0:
        raise ValidationError("Price must be non-negative")

    # Expiration is always recomputed, never carried over
    created_at = payload.created_at or existing.created_at
    membership_type, expiration_date = expiration_for(
        payload.type if payload.type is not None else existing.type, created_at
    )
    data = {
        "type": membership_type,
        "created_at": created_at,
        "payment_date": payload.payment_date or existing.payment_date,
        "price": payload.price if payload.price is not None else existing.price,
        "expiration_date": expiration_date,
    }
    updated = await uow.memberships.update(
        membership_id, data, expected_version=existing.version
    )
    if not updated:
        raise OperationFailed(f"Could not update membership {membership_id}")
    await uow.commit()
    return updated
