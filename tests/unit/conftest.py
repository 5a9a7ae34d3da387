from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace
from uuid import UUID

import pytest

from src.domain.models.membership import Membership
from src.domain.models.user import User


class InMemoryUsers:
    def __init__(self) -> None:
        self.rows: dict[UUID, User] = {}

    async def add(self, user: User) -> User:
        self.rows[user.id] = replace(user)
        return replace(user)

    async def get(self, user_id: UUID) -> User | None:
        row = self.rows.get(user_id)
        return replace(row) if row else None

    async def get_by_email(self, email: str) -> User | None:
        for row in self.rows.values():
            if row.email == email.lower():
                return replace(row)
        return None

    async def get_by_membership_id(self, membership_id: UUID) -> User | None:
        for row in self.rows.values():
            if row.membership_id == membership_id:
                return replace(row)
        return None

    async def set_membership(self, user_id: UUID, membership_id: UUID | None) -> None:
        self.rows[user_id].membership_id = membership_id


class InMemoryMemberships:
    def __init__(self) -> None:
        self.rows: dict[UUID, Membership] = {}

    async def add(self, membership: Membership) -> Membership:
        self.rows[membership.id] = replace(membership)
        return replace(membership)

    async def get(self, membership_id: UUID) -> Membership | None:
        row = self.rows.get(membership_id)
        return replace(row) if row else None

    async def list_active(self) -> list[Membership]:
        active = [replace(m) for m in self.rows.values() if not m.is_deleted]
        return sorted(active, key=lambda m: (m.created_at, m.id))

    async def update(self, membership_id, data, expected_version):
        row = self.rows.get(membership_id)
        if row is None or row.version != expected_version:
            return None
        updated = replace(row, **data, version=expected_version + 1)
        self.rows[membership_id] = updated
        return replace(updated)

    async def delete(self, membership_id: UUID) -> bool:
        return self.rows.pop(membership_id, None) is not None


def make_uow(users: InMemoryUsers, memberships: InMemoryMemberships):
    commits: list[int] = []

    async def commit():
        commits.append(1)

    async def rollback():
        return None

    return SimpleNamespace(
        users=users,
        memberships=memberships,
        commit=commit,
        rollback=rollback,
        commits=commits,
    )


@pytest.fixture()
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture()
def memberships_repo() -> InMemoryMemberships:
    return InMemoryMemberships()


@pytest.fixture()
def uow(users_repo: InMemoryUsers, memberships_repo: InMemoryMemberships):
    return make_uow(users_repo, memberships_repo)


@pytest.fixture()
def member(users_repo: InMemoryUsers) -> User:
    user = User.create(
        email="User@Example.com",
        hashed_password="hashed",
        name="Ada",
        phone="555",
        address="1 Main St",
    )
    users_repo.rows[user.id] = user
    return user
