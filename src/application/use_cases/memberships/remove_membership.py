from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, OperationFailed
from src.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RemoveMembershipOutput:
    id: UUID
    message: str


async def execute(uow: UnitOfWork, membership_id: UUID) -> RemoveMembershipOutput:
    """Erase a membership row and detach it from the user referencing it."""
    membership = await uow.memberships.get(membership_id)
    if not membership:
        raise NotFound(f"Membership {membership_id} not found")

    owner = await uow.users.get_by_membership_id(membership_id)
    if owner:
        await uow.users.set_membership(owner.id, None)

    deleted = await uow.memberships.delete(membership_id)
    if not deleted:
        raise OperationFailed(f"Could not remove membership {membership_id}")
    await uow.commit()

    logger.info("Membership %s removed", membership_id)
    return RemoveMembershipOutput(id=membership_id, message="Membership removed successfully")
