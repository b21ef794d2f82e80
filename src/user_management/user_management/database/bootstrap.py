from __future__ import annotations

import logging
from pathlib import Path

import mysql.connector
from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DBConfig

logger = logging.getLogger(__name__)

DEMO_USERS = (
    ("aanderson", "password", "Alice", "Anderson", Role.ADMIN),
    ("bbailey", "password", "Bob", "Bailey", Role.USER),
    ("ccountryman", "password", "Charlie", "Countryman", Role.USER),
    ("ddavis", "password", "Daniel", "Davis", Role.USER),
    ("eeinstein", "password", "Emily", "Einstein", Role.USER),
)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    # schema.sql holds a single CREATE TABLE statement; the database itself is created above
    ddl = Path(schema_path).read_text(encoding="utf-8").strip().rstrip(";")

    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute(ddl)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema from %s", schema_path)


def ensure_demo_users(db_config: dict) -> None:
    """Insert or refresh the demo accounts (idempotent)."""
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor(dictionary=True)
        for username, password, first_name, last_name, role in DEMO_USERS:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT user_id FROM users WHERE username=%s", (username,))
            if cur.fetchone():
                cur.execute(
                    """
                    UPDATE users
                    SET password_hash=%s, first_name=%s, last_name=%s, role=%s
                    WHERE username=%s
                    """,
                    (password_hash, first_name, last_name, role.value, username),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO users (username, password_hash, first_name, last_name, role)
                    VALUES (%s, %s, %s, %s, %s)
                    """,
                    (username, password_hash, first_name, last_name, role.value),
                )
        conn.commit()
    finally:
        conn.close()
    logger.info("Demo users ready (%d accounts)", len(DEMO_USERS))


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
