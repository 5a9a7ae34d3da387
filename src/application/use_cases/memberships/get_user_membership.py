from __future__ import annotations

import logging
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.membership import Membership

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, user_id: UUID) -> Membership | None:
    """Membership the user currently references, or None."""
    user = await uow.users.get(user_id)
    if user is None or user.membership_id is None:
        logger.debug("No membership found for user %s", user_id)
        return None
    return await uow.memberships.get(user.membership_id)
