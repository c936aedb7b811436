import logging
import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.core.errors import AuthError, ConflictError, ForbiddenError, NotFoundError, ValidationError
from shopfront.core.security import TokenService, get_password_hash, verify_password
from shopfront.db.repositories.user_repository import UserRepository
from shopfront.domains.identity.entities import Role, User
from shopfront.domains.identity.schemas import (
    AdminRegistration, LoginResponse, UserCreate, UserLogin, UserUpdate
)

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class IdentityService:
    """Login, initial admin bootstrap and user administration"""

    def __init__(self, session: AsyncSession, tokens: TokenService):
        self.session = session
        self.tokens = tokens
        self.user_repository = UserRepository(session)

    async def login(self, login_data: UserLogin) -> LoginResponse:
        """Check the credentials and issue a token.

        Unknown email and wrong password fail with the same message.
        """
        user = await self.user_repository.get_by_email(login_data.email)

        if not user or not verify_password(login_data.password, user.password_hash):
            logger.warning("Failed login attempt for %s", login_data.email)
            raise AuthError(INVALID_CREDENTIALS)

        token = self.tokens.issue(user.id, user.email, user.role)
        logger.info("User %s logged in as %s", user.id, user.role.value)

        return LoginResponse(message="Login successful", token=token, role=user.role)

    async def register_initial_admin(self, data: AdminRegistration, allow_bootstrap: bool) -> User:
        """Create the first admin; closed once an admin exists or when disabled"""
        if not allow_bootstrap:
            raise ForbiddenError("Initial admin registration is disabled")

        if await self.user_repository.admin_exists():
            raise ForbiddenError("An admin user already exists")

        if await self.user_repository.email_exists(data.email):
            raise ConflictError("A user with this email already exists")

        user = await self._create(data.email, data.password, Role.admin)
        logger.info("Bootstrapped initial admin %s", user.id)
        return user

    async def list_users(self) -> List[User]:
        return await self.user_repository.get_all()

    async def create_user(self, data: UserCreate) -> User:
        if await self.user_repository.email_exists(data.email):
            raise ConflictError("A user with this email already exists")

        user = await self._create(data.email, data.password, data.role)
        logger.info("Created user %s with role %s", user.id, user.role.value)
        return user

    async def update_user(self, user_id: str, data: UserUpdate) -> None:
        changes = data.model_dump(exclude_none=True)
        if not changes:
            raise ValidationError("No update data provided")

        if await self.user_repository.get_by_id(user_id) is None:
            raise NotFoundError("User not found")

        values = {}
        if "email" in changes:
            if await self.user_repository.email_exists(changes["email"], exclude_id=user_id):
                raise ConflictError("A user with this email already exists")
            values["email"] = changes["email"]
        if "password" in changes:
            values["password_hash"] = get_password_hash(changes["password"])
        if "role" in changes:
            values["role"] = Role(changes["role"]).value

        await self.user_repository.update(user_id, values)
        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(changes)))

    async def delete_user(self, user_id: str) -> None:
        if not await self.user_repository.delete(user_id):
            raise NotFoundError("User not found")
        logger.info("Deleted user %s", user_id)

    async def _create(self, email: str, password: str, role: Role) -> User:
        user = User(
            id=str(uuid.uuid4()),
            email=email,
            password_hash=get_password_hash(password),
            role=role,
        )
        return await self.user_repository.create(user)
