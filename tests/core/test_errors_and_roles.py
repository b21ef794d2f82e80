from __future__ import annotations

import pytest

from src.user_management.user_management.core.enums import Role
from src.user_management.user_management.core.exceptions import (
    AuthenticationError,
    BadRequestError,
    DomainError,
    ResourceNotFoundError,
    ResourcePersistenceError,
)


@pytest.mark.parametrize(
    "error_cls, status",
    [
        (BadRequestError, 400),
        (AuthenticationError, 401),
        (ResourceNotFoundError, 404),
        (ResourcePersistenceError, 409),
    ],
)
def test_errors_share_base_and_carry_status(error_cls, status):
    err = error_cls()

    assert isinstance(err, DomainError)
    assert err.status_code == status
    assert str(err) == error_cls.default_message


def test_error_message_overrides_default():
    assert str(ResourceNotFoundError("No users found")) == "No users found"


@pytest.mark.parametrize("raw, role", [("Admin", Role.ADMIN), ("user", Role.USER), (" locked ", Role.LOCKED)])
def test_role_parse_is_case_insensitive(raw, role):
    assert Role.parse(raw) is role


def test_role_parse_unknown_raises():
    with pytest.raises(ValueError):
        Role.parse("superuser")
