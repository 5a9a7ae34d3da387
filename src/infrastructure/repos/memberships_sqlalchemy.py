from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import OperationFailed
from src.application.interfaces.repositories.memberships import MembershipRepository
from src.domain.models.membership import Membership
from src.domain.models.user import UserRef
from src.infrastructure.db.orm.membership import MembershipORM

_UPDATABLE_FIELDS = frozenset(
    {"type", "created_at", "payment_date", "price", "expiration_date", "is_deleted"}
)


class MembershipsSQLAlchemyRepository(MembershipRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MembershipORM) -> Membership:
        return Membership(
            id=orm.id,
            user=UserRef(id=orm.user_id),
            type=orm.type,
            created_at=orm.created_at,
            payment_date=orm.payment_date,
            price=orm.price,
            expiration_date=orm.expiration_date,
            is_deleted=orm.is_deleted,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def _execute(self, stmt):
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise OperationFailed("Membership storage error") from exc

    async def add(self, membership: Membership) -> Membership:
        orm = MembershipORM(
            id=membership.id,
            user_id=membership.user.id,
            type=membership.type,
            created_at=membership.created_at,
            payment_date=membership.payment_date,
            price=membership.price,
            expiration_date=membership.expiration_date,
            is_deleted=membership.is_deleted,
            updated_at=membership.updated_at,
            version=membership.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise OperationFailed("Could not store membership") from exc
        return self._to_domain(orm)

    async def get(self, membership_id: UUID) -> Membership | None:
        stmt = select(MembershipORM).where(MembershipORM.id == membership_id)
        result = await self._execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_active(self) -> list[Membership]:
        stmt = (
            select(MembershipORM)
            .where(MembershipORM.is_deleted.is_(False))
            .order_by(MembershipORM.created_at, MembershipORM.id)
        )
        result = await self._execute(stmt)
        return [self._to_domain(r) for r in result.scalars().all()]

    async def update(
        self, membership_id: UUID, data: dict[str, Any], expected_version: int
    ) -> Membership | None:
        unknown = set(data) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported membership fields: {sorted(unknown)}")
        stmt = (
            update(MembershipORM)
            .where(MembershipORM.id == membership_id, MembershipORM.version == expected_version)
            .values(**data, version=expected_version + 1)
        )
        result = await self._execute(stmt)
        if result.rowcount == 0:
            return None
        self.session.expire_all()
        return await self.get(membership_id)

    async def delete(self, membership_id: UUID) -> bool:
        stmt = delete(MembershipORM).where(MembershipORM.id == membership_id)
        result = await self._execute(stmt)
        return result.rowcount > 0
