from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.user import User
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class RegisterUserInput:
    email: str
    password: str
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    dob: date | None = None


async def execute(
    *,
    uow: UnitOfWork,
    payload: RegisterUserInput,
    password_hasher: PasswordHasher,
) -> User:
    existing = await uow.users.get_by_email(payload.email)
    if existing:
        raise ConflictError("Email already registered")
    hashed = password_hasher.hash(payload.password)
    user = User.create(
        email=payload.email,
        hashed_password=hashed,
        name=payload.name,
        phone=payload.phone,
        address=payload.address,
        dob=payload.dob,
    )
    created = await uow.users.add(user)
    await uow.commit()
    return created
