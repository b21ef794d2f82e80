"""Pure predicates used by the service layer to reject malformed input."""

from __future__ import annotations

import math
from dataclasses import fields
from typing import Any, Mapping, Optional

from ..core.enums import Role
from ..users.model import User


def is_valid_id(value: Any) -> bool:
    """True iff ``value`` is a positive integral number (``3.0`` counts, ``3.14`` does not)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, float):
        return not math.isnan(value) and value.is_integer() and value > 0
    return False


def is_valid_strings(*values: Any) -> bool:
    return all(isinstance(v, str) and v.strip() != "" for v in values)


def is_empty_object(obj: Optional[Mapping[str, Any]]) -> bool:
    if obj is None:
        return True
    return isinstance(obj, Mapping) and len(obj) == 0


def is_valid_object(obj: Any, *nullable_props: str) -> bool:
    """Check that ``obj`` is a User whose non-nullable fields are set and well typed.

    Fields named in ``nullable_props`` are skipped (e.g. ``"id"`` on creation,
    before persistence assigns one).
    """
    if not isinstance(obj, User):
        return False

    for f in fields(obj):
        if f.name in nullable_props:
            continue
        value = getattr(obj, f.name)
        if f.name == "id":
            if not is_valid_id(value):
                return False
        elif f.name == "role":
            if not isinstance(value, Role):
                return False
        elif not is_valid_strings(value):
            return False
    return True
