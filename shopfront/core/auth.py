"""Access control gates.

``authenticate`` turns the ``Authorization`` header into an ``Identity``;
``authorize`` checks that identity against a required role. ``require_role``
chains the two as a FastAPI dependency, so a route declares its gates in its
signature and receives the verified identity as a plain argument.
"""

import logging
from datetime import timedelta
from typing import Callable, Optional

from fastapi import Depends, Header

from shopfront.core.config import Settings, get_settings
from shopfront.core.errors import AuthError, ForbiddenError
from shopfront.core.security import TokenService, extract_token_from_header
from shopfront.domains.identity.entities import Identity, Role

logger = logging.getLogger(__name__)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(hours=settings.access_token_expire_hours),
    )


async def authenticate(
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    token = extract_token_from_header(authorization)
    if token is None:
        raise AuthError("Authorization token is missing or malformed")
    return tokens.verify(token)


def authorize(required_role: Role) -> Callable[[Optional[Identity]], Identity]:
    """Build a gate that lets through ``required_role`` and every role above it"""

    def gate(identity: Optional[Identity]) -> Identity:
        if identity is None:
            raise AuthError("Authentication required")
        if not identity.role.grants(required_role):
            logger.warning(
                "User %s (%s) denied, %s required",
                identity.user_id, identity.role.value, required_role.value,
            )
            raise ForbiddenError("Access denied: insufficient role")
        return identity

    return gate


def require_role(required_role: Role):
    gate = authorize(required_role)

    async def dependency(identity: Identity = Depends(authenticate)) -> Identity:
        return gate(identity)

    return dependency


require_admin = require_role(Role.admin)
require_editor = require_role(Role.editor)
