from fastapi import APIRouter, Depends, status

from shopfront.api.deps import get_identity_service
from shopfront.core.config import Settings, get_settings
from shopfront.domains.identity.schemas import (
    AdminRegistration, LoginResponse, UserCreatedResponse, UserLogin
)
from shopfront.domains.identity.services import IdentityService

router = APIRouter(prefix="/api", tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: UserLogin,
    identity_service: IdentityService = Depends(get_identity_service),
):
    """Exchange email and password for a bearer token"""
    return await identity_service.login(login_data)


@router.post(
    "/admin/register-initial-admin",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_initial_admin(
    data: AdminRegistration,
    settings: Settings = Depends(get_settings),
    identity_service: IdentityService = Depends(get_identity_service),
):
    """Create the first admin account.

    Only works while no admin exists and ``ALLOW_ADMIN_BOOTSTRAP`` is on.
    """
    user = await identity_service.register_initial_admin(data, settings.allow_admin_bootstrap)
    return UserCreatedResponse(message="Admin user registered successfully", user_id=user.id)
