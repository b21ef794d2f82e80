from __future__ import annotations

import logging
from typing import Any, List, Mapping

from ..common import validators
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    BadRequestError,
    ResourceNotFoundError,
    ResourcePersistenceError,
)
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use case: manage users.

    Validation always runs before the repository is touched, and every User
    returned to the caller has its password stripped.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    async def get_all_users(self) -> List[User]:
        users = await self._users.get_all()
        if not users:
            logger.warning("User listing found no users")
            raise ResourceNotFoundError("No users found")
        return [u.without_password() for u in users]

    async def get_user_by_id(self, user_id: Any) -> User:
        if not validators.is_valid_id(user_id):
            raise BadRequestError(f"Invalid user id: {user_id!r}")

        user = await self._users.get_by_id(int(user_id))
        if user is None:
            logger.warning("User lookup failed: id=%s", user_id)
            raise ResourceNotFoundError(f"No user found with id {user_id}")
        return user.without_password()

    async def get_user_by_unique_key(self, query: Mapping[str, Any]) -> User:
        if not isinstance(query, Mapping):
            raise BadRequestError("Query must map one unique field to a value")
        if validators.is_empty_object(query) or len(query) != 1:
            raise BadRequestError("Exactly one unique field must be provided")

        key, value = next(iter(query.items()))
        if key not in User.UNIQUE_KEYS:
            raise BadRequestError(f"Invalid property passed: {key}")
        if not validators.is_valid_strings(value):
            raise BadRequestError(f"Invalid value provided for {key}")

        user = await self._users.get_user_by_unique_key(key, value)
        if user is None:
            logger.warning("User lookup failed: %s=%s", key, value)
            raise ResourceNotFoundError(f"No user found with {key} {value!r}")
        return user.without_password()

    async def is_username_available(self, username: str) -> bool:
        return await self._users.get_user_by_unique_key("username", username) is None

    async def add_new_user(self, user: User) -> User:
        if not validators.is_valid_object(user, "id"):
            raise BadRequestError("Invalid user provided (invalid value found)")

        if not await self.is_username_available(user.username):
            logger.warning("Username already in use: %s", user.username)
            raise ResourcePersistenceError("The provided username is already taken")

        persisted = await self._users.save(user)
        logger.info("User created: id=%s username=%s", persisted.id, persisted.username)
        return persisted.without_password()

    async def authenticate(self, username: str, password: str) -> User:
        if not validators.is_valid_strings(username, password):
            raise BadRequestError("Username and password are required")

        user = await self._users.get_user_by_credentials(username, password)
        if user is None:
            logger.warning("Authentication failed: username=%s", username)
            raise AuthenticationError("Invalid username or password")
        if user.role == Role.LOCKED:
            logger.warning("Authentication refused for locked account: username=%s", username)
            raise AuthenticationError("This account is locked")
        return user.without_password()

    async def update_user(self, user: User) -> User:
        # password may be omitted to keep the current one
        if not validators.is_valid_object(user, "password"):
            raise BadRequestError("Invalid user provided (invalid value found)")

        current = await self._users.get_by_id(int(user.id))
        if current is None:
            logger.warning("User update failed: id=%s not found", user.id)
            raise ResourceNotFoundError(f"No user found with id {user.id}")

        if user.username != current.username and not await self.is_username_available(user.username):
            logger.warning("Username already in use: %s", user.username)
            raise ResourcePersistenceError("The provided username is already taken")

        updated = await self._users.update(user)
        if updated is None:
            raise ResourcePersistenceError(f"User {user.id} could not be updated")
        logger.info("User updated: id=%s", updated.id)
        return updated.without_password()

    async def delete_by_id(self, user_id: Any) -> bool:
        if not validators.is_valid_id(user_id):
            raise BadRequestError(f"Invalid user id: {user_id!r}")

        if not await self._users.delete_by_id(int(user_id)):
            logger.warning("User delete failed: id=%s not found", user_id)
            raise ResourceNotFoundError(f"No user found with id {user_id}")
        logger.info("User deleted: id=%s", user_id)
        return True
