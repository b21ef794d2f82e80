from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "Admin"
    USER = "User"
    LOCKED = "Locked"

    @classmethod
    def parse(cls, value: str) -> "Role":
        # Stored rows and fixtures use both "locked" and "Locked".
        for role in cls:
            if role.value.lower() == str(value).strip().lower():
                return role
        raise ValueError(f"Unknown role: {value!r}")
