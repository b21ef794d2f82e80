from __future__ import annotations

import pytest

from config import get_settings_module
from src.user_management.user_management import main
from src.user_management.user_management.database.connection import DBConfig, DatabaseConnection
from src.user_management.user_management.users.mysql_user_repository import MySQLUserRepository
from src.user_management.user_management.users.service import UserService


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("TESTING", "config.testing"),
        ("anything-else", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_db_config_from_dict_applies_defaults():
    config = DBConfig.from_dict({"host": "db", "port": "3307"})

    assert config.host == "db"
    assert config.port == 3307
    assert config.database == "user_management_db"


def test_create_container_wires_service_without_touching_db(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(DatabaseConnection, "_instances", {})

    def fail(*args, **kwargs):
        raise AssertionError("bootstrap must not run in testing")

    monkeypatch.setattr(main, "apply_schema", fail)
    monkeypatch.setattr(main, "ensure_demo_users", fail)

    container = main.create_container()

    assert isinstance(container.user_service, UserService)
    assert isinstance(container.users_repo, MySQLUserRepository)
    assert list(DatabaseConnection._instances.values()) == [container.conn]


def test_connection_factory_is_shared_per_config(monkeypatch):
    monkeypatch.setattr(DatabaseConnection, "_instances", {})
    main_db = DBConfig.from_dict({"database": "user_management_db"})
    other_db = DBConfig.from_dict({"database": "user_management_test"})

    assert DatabaseConnection.get_instance(main_db) is DatabaseConnection.get_instance(DBConfig.from_dict({}))
    assert DatabaseConnection.get_instance(other_db) is not DatabaseConnection.get_instance(main_db)
