from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound, OperationFailed
from src.application.interfaces.repositories.users import UserRepository
from src.domain.models.user import User
from src.infrastructure.db.orm.user import UserORM


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: UserORM) -> User:
        return User(
            id=orm.id,
            email=orm.email,
            hashed_password=orm.hashed_password,
            name=orm.name,
            phone=orm.phone,
            address=orm.address,
            dob=orm.dob,
            membership_id=orm.membership_id,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def _first(self, stmt) -> User | None:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise OperationFailed("User storage error") from exc
        orm = result.scalars().first()
        return self._to_domain(orm) if orm else None

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            email=user.email,
            hashed_password=user.hashed_password,
            name=user.name,
            phone=user.phone,
            address=user.address,
            dob=user.dob,
            membership_id=user.membership_id,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Email already registered") from exc
        except SQLAlchemyError as exc:
            raise OperationFailed("Could not store user") from exc
        return self._to_domain(orm)

    async def get(self, user_id: UUID) -> User | None:
        return await self._first(select(UserORM).where(UserORM.id == user_id))

    async def get_by_email(self, email: str) -> User | None:
        return await self._first(select(UserORM).where(UserORM.email == email.lower()))

    async def get_by_membership_id(self, membership_id: UUID) -> User | None:
        return await self._first(select(UserORM).where(UserORM.membership_id == membership_id))

    async def set_membership(self, user_id: UUID, membership_id: UUID | None) -> None:
        stmt = (
            update(UserORM)
            .where(UserORM.id == user_id)
            .values(membership_id=membership_id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise OperationFailed("Could not update user membership reference") from exc
        if result.rowcount == 0:
            raise NotFound("User not found")
