from typing import List

from fastapi import APIRouter, Depends, status

from shopfront.api.deps import get_identity_service
from shopfront.core.auth import require_admin
from shopfront.domains.identity.entities import Identity
from shopfront.domains.identity.schemas import (
    UserCreate, UserCreatedResponse, UserResponse, UserUpdate
)
from shopfront.domains.identity.services import IdentityService
from shopfront.domains.schemas import MessageResponse

router = APIRouter(prefix="/api/admin/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def get_users(
    _admin: Identity = Depends(require_admin),
    identity_service: IdentityService = Depends(get_identity_service),
):
    users = await identity_service.list_users()
    return [UserResponse.model_validate(user) for user in users]


@router.post("", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    _admin: Identity = Depends(require_admin),
    identity_service: IdentityService = Depends(get_identity_service),
):
    user = await identity_service.create_user(data)
    return UserCreatedResponse(message="User created successfully", user_id=user.id)


@router.put("/{user_id}", response_model=MessageResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    _admin: Identity = Depends(require_admin),
    identity_service: IdentityService = Depends(get_identity_service),
):
    await identity_service.update_user(user_id, data)
    return MessageResponse(message="User updated successfully")


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    _admin: Identity = Depends(require_admin),
    identity_service: IdentityService = Depends(get_identity_service),
):
    await identity_service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
