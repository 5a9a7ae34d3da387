from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.membership import Membership


@dataclass(slots=True)
class BlockedMembershipNotice:
    id: UUID
    message: str
    blocked: bool = True


async def execute(uow: UnitOfWork, membership_id: UUID) -> Membership | BlockedMembershipNotice:
    membership = await uow.memberships.get(membership_id)
    if not membership:
        raise NotFound(f"Membership {membership_id} not found")
    if membership.is_deleted:
        return BlockedMembershipNotice(
            id=membership_id, message=f"Membership {membership_id} is blocked"
        )
    return membership
