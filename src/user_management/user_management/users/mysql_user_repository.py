from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Sequence

import mysql.connector
from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role
from ..core.exceptions import BadRequestError, ResourcePersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

_SELECT_USER = "SELECT user_id, username, password_hash, first_name, last_name, role FROM users"

# unique key -> column; keeps caller-provided keys out of the SQL text
_UNIQUE_COLUMNS = {"username": "username"}


def _row_to_user(row: Dict[str, Any]) -> User:
    return User(
        id=int(row["user_id"]),
        username=row["username"],
        password=row["password_hash"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        role=Role.parse(row["role"]),
    )


class MySQLUserRepository(UserRepository):
    """mysql-connector backed repository.

    The connector is blocking, so each operation runs in a worker thread.
    Stored ``password`` values are werkzeug hashes, never plain text.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    async def get_all(self) -> Sequence[User]:
        return await asyncio.to_thread(self._get_all)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return await asyncio.to_thread(self._get_one, "user_id", user_id)

    async def get_user_by_unique_key(self, key: str, value: str) -> Optional[User]:
        column = _UNIQUE_COLUMNS.get(key)
        if column is None:
            raise BadRequestError(f"Invalid property passed: {key}")
        return await asyncio.to_thread(self._get_one, column, value)

    async def get_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        user = await asyncio.to_thread(self._get_one, "username", username)
        if user is None:
            return None
        try:
            ok = check_password_hash(user.password or "", password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False
        return user if ok else None

    async def save(self, user: User) -> User:
        return await asyncio.to_thread(self._insert, user)

    async def update(self, user: User) -> Optional[User]:
        return await asyncio.to_thread(self._update, user)

    async def delete_by_id(self, user_id: int) -> bool:
        return await asyncio.to_thread(self._delete, user_id)

    def _get_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT_USER} ORDER BY user_id")
            return [_row_to_user(r) for r in fetchall(cur)]

    def _get_one(self, column: str, value: Any) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT_USER} WHERE {column}=%s", (value,))
            row = fetchone(cur)
            if not row:
                return None
            return _row_to_user(row)

    def _insert(self, user: User) -> User:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(username, password_hash, first_name, last_name, role)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (
                        user.username,
                        generate_password_hash(user.password),
                        user.first_name,
                        user.last_name,
                        user.role.value,
                    ),
                )
                new_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            logger.warning("Insert rejected for username=%s: %s", user.username, e)
            raise ResourcePersistenceError("The provided username is already taken") from e
        return User(
            id=new_id,
            username=user.username,
            password=user.password,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
        )

    def _update(self, user: User) -> Optional[User]:
        assignments = ["username=%s", "first_name=%s", "last_name=%s", "role=%s"]
        params: list[Any] = [user.username, user.first_name, user.last_name, user.role.value]
        if user.password is not None:
            assignments.append("password_hash=%s")
            params.append(generate_password_hash(user.password))
        params.append(user.id)

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"UPDATE users SET {', '.join(assignments)} WHERE user_id=%s", tuple(params))
        except mysql.connector.IntegrityError as e:
            logger.warning("Update rejected for user_id=%s: %s", user.id, e)
            raise ResourcePersistenceError("The provided username is already taken") from e
        return self._get_one("user_id", user.id)

    def _delete(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s", (user_id,))
            return cur.rowcount > 0
