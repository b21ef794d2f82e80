from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, never on a concrete DB.
    Absence is always ``None`` (lookups) or ``False`` (delete).
    """

    async def get_all(self) -> Sequence[User]:
        raise NotImplementedError

    async def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    async def get_user_by_unique_key(self, key: str, value: str) -> Optional[User]:
        raise NotImplementedError

    async def get_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        raise NotImplementedError

    async def save(self, user: User) -> User:
        """Persist a new user and return it with its assigned id."""

        raise NotImplementedError

    async def update(self, user: User) -> Optional[User]:
        """Overwrite the stored user; a ``None`` password keeps the stored hash."""

        raise NotImplementedError

    async def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError
