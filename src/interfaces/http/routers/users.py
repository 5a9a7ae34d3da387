from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.use_cases.memberships import get_user_membership
from src.application.use_cases.users import get_user, register_user
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import get_password_hasher, get_uow
from src.interfaces.http.schemas.memberships import MembershipResponse
from src.interfaces.http.schemas.users import UserCreate, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user_endpoint(
    payload: UserCreate,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    user = await register_user.execute(
        uow=uow,
        payload=register_user.RegisterUserInput(**payload.model_dump()),
        password_hasher=password_hasher,
    )
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_endpoint(user_id: UUID, uow=Depends(get_uow)):
    user = await get_user.execute(uow, user_id)
    return UserResponse.model_validate(user)


@router.get("/{user_id}/membership", response_model=MembershipResponse | None)
async def get_user_membership_endpoint(user_id: UUID, uow=Depends(get_uow)):
    """Current membership of a user, or null when the user has none."""

    membership = await get_user_membership.execute(uow, user_id)
    if membership is None:
        return None
    return MembershipResponse.model_validate(membership)
