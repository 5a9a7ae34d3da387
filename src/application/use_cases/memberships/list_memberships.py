from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.membership import Membership


async def execute(uow: UnitOfWork) -> list[Membership]:
    """List memberships that are not blocked, oldest first."""
    return await uow.memberships.list_active()
