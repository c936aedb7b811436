from shopfront.domains.identity.entities import Identity, Role, User
from shopfront.domains.identity.schemas import (
    AdminRegistration, LoginResponse, UserCreate, UserCreatedResponse,
    UserLogin, UserResponse, UserUpdate
)

__all__ = [
    "Identity", "Role", "User",
    "AdminRegistration", "LoginResponse", "UserCreate", "UserCreatedResponse",
    "UserLogin", "UserResponse", "UserUpdate",
]
