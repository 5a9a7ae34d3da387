from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, OperationFailed
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.membership_status import MembershipStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ToggleBlockOutput:
    id: UUID
    is_deleted: bool
    status: MembershipStatus
    message: str


async def execute(uow: UnitOfWork, membership_id: UUID) -> ToggleBlockOutput:
    """Flip a membership between Active and Blocked.

    The row is kept; calling this twice restores the original state.
    """
    membership = await uow.memberships.get(membership_id)
    if not membership:
        raise NotFound(f"Membership {membership_id} not found")

    updated = await uow.memberships.update(
        membership_id,
        {"is_deleted": not membership.is_deleted},
        expected_version=membership.version,
    )
    if not updated:
        raise OperationFailed(f"Could not change status of membership {membership_id}")
    await uow.commit()

    logger.info("Membership %s is now %s", membership_id, updated.status.value)
    verb = "blocked" if updated.is_deleted else "unblocked"
    return ToggleBlockOutput(
        id=membership_id,
        is_deleted=updated.is_deleted,
        status=updated.status,
        message=f"Membership {membership_id} {verb} successfully",
    )
