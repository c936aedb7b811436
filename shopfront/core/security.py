import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from shopfront.core.errors import AuthError, ConfigurationError
from shopfront.domains.identity.entities import Identity, Role

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_PASSWORD_BYTES = 72


def _bcrypt_input(password: str) -> str:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES].decode("utf-8", "ignore")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_bcrypt_input(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_bcrypt_input(password))


class TokenService:
    """Issues and verifies signed, time-limited identity assertions (JWT)"""

    DEFAULT_TTL = timedelta(hours=8)

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = DEFAULT_TTL):
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: str, email: str, role: Role, expires_delta: Optional[timedelta] = None) -> str:
        """Sign a token carrying the user's id, email and role"""
        if not self.secret:
            raise ConfigurationError("Token signing key is not configured")

        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "userId": str(user_id),
            "email": email,
            "role": Role(role).value,
            "iat": now,
            "exp": now + (expires_delta if expires_delta is not None else self.ttl),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        """Check signature, structure and expiry; return the caller's identity.

        Expired and malformed tokens both raise ``AuthError`` (401), with
        different messages.
        """
        if not self.secret:
            raise ConfigurationError("Token signing key is not configured")

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require_exp": True},
            )
        except ExpiredSignatureError:
            logger.warning("Rejected expired token")
            raise AuthError("Token has expired")
        except JWTError as e:
            logger.warning("Rejected invalid token: %s", e)
            raise AuthError("Invalid token")

        role = Role.parse(payload.get("role", ""))
        user_id = payload.get("userId") or payload.get("sub")
        email = payload.get("email")
        if role is None or not user_id or not email:
            logger.warning("Rejected token with incomplete claims")
            raise AuthError("Invalid token")

        return Identity(
            user_id=str(user_id),
            email=email,
            role=role,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )


def extract_token_from_header(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer <token>`` header, or None"""
    if not authorization:
        return None

    parts = authorization.split()

    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]
