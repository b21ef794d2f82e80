from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, FrozenSet, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no DB access. ``password`` is write-only: the
    service clears it on every User it hands back.
    """

    UNIQUE_KEYS: ClassVar[FrozenSet[str]] = frozenset({"username"})

    id: Optional[int]
    username: str
    password: Optional[str]
    first_name: str
    last_name: str
    role: Role

    def without_password(self) -> "User":
        return replace(self, password=None)
