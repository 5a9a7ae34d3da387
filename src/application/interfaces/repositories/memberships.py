from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from src.domain.models.membership import Membership


class MembershipRepository(Protocol):
    async def add(self, membership: Membership) -> Membership: ...

    async def get(self, membership_id: UUID) -> Membership | None: ...

    async def list_active(self) -> list[Membership]: ...

    # Conditional on expected_version; returns None when no row matched
    async def update(
        self, membership_id: UUID, data: dict[str, Any], expected_version: int
    ) -> Membership | None: ...

    async def delete(self, membership_id: UUID) -> bool: ...
