from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.use_cases.memberships import (
    add_membership,
    get_membership,
    list_memberships,
    remove_membership,
    toggle_membership_block,
    update_membership,
)
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.memberships import (
    MembershipBlockedResponse,
    MembershipBlockToggleResponse,
    MembershipCreate,
    MembershipCreatedResponse,
    MembershipRemovedResponse,
    MembershipResponse,
    MembershipUpdate,
)

router = APIRouter(prefix="/memberships", tags=["memberships"])


@router.post("", response_model=MembershipCreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_membership_endpoint(payload: MembershipCreate, uow=Depends(get_uow)):
    """Purchase a membership for an existing user."""

    result = await add_membership.execute(
        uow,
        add_membership.AddMembershipInput(
            email=payload.email,
            type=payload.type,
            created_at=payload.created_at,
            payment_date=payload.payment_date,
            price=payload.price,
        ),
    )
    return MembershipCreatedResponse.model_validate(result)


@router.get("", response_model=list[MembershipResponse])
async def list_memberships_endpoint(uow=Depends(get_uow)):
    items = await list_memberships.execute(uow)
    return [MembershipResponse.model_validate(item) for item in items]


@router.get("/{membership_id}", response_model=MembershipResponse | MembershipBlockedResponse)
async def get_membership_endpoint(membership_id: UUID, uow=Depends(get_uow)):
    """Get a membership, or a blocked notice when it has been blocked."""

    result = await get_membership.execute(uow, membership_id)
    if isinstance(result, get_membership.BlockedMembershipNotice):
        return MembershipBlockedResponse.model_validate(result)
    return MembershipResponse.model_validate(result)


@router.put("/{membership_id}", response_model=MembershipResponse)
async def update_membership_endpoint(
    membership_id: UUID, payload: MembershipUpdate, uow=Depends(get_uow)
):
    input_data = update_membership.UpdateMembershipInput(**payload.model_dump(exclude_unset=True))
    updated = await update_membership.execute(uow, membership_id, input_data)
    return MembershipResponse.model_validate(updated)


@router.put("/{membership_id}/block", response_model=MembershipBlockToggleResponse)
async def toggle_membership_block_endpoint(membership_id: UUID, uow=Depends(get_uow)):
    """Block an active membership or unblock a blocked one."""

    result = await toggle_membership_block.execute(uow, membership_id)
    return MembershipBlockToggleResponse.model_validate(result)


@router.delete("/{membership_id}", response_model=MembershipRemovedResponse)
async def remove_membership_endpoint(membership_id: UUID, uow=Depends(get_uow)):
    """Permanently remove a membership and detach it from its user."""

    result = await remove_membership.execute(uow, membership_id)
    return MembershipRemovedResponse.model_validate(result)
