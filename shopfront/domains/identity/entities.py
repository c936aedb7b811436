import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class Role(str, enum.Enum):
    """User roles, ordered by rank; a higher rank grants every lower one"""

    editor = "editor"
    admin = "admin"

    @property
    def rank(self) -> int:
        return _ROLE_RANKS[self]

    def grants(self, required: "Role") -> bool:
        """True when a holder of this role may pass a gate requiring ``required``"""
        return self.rank >= required.rank

    @classmethod
    def parse(cls, value: str) -> Optional["Role"]:
        try:
            return cls(value)
        except ValueError:
            return None


_ROLE_RANKS = {
    Role.editor: 1,
    Role.admin: 2,
}


@dataclass(frozen=True)
class Identity:
    """Verified claims of the caller, taken from a bearer token"""

    user_id: str
    email: str
    role: Role
    expires_at: datetime


@dataclass
class User:
    id: str
    email: str
    password_hash: str
    role: Role
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role.value})"
