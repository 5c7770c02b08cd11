from __future__ import annotations

from typing import Any, Iterable

from ..core.constants import MAX_NAME_LENGTH, MAX_VALUE, MIN_VALUE
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} required", details={"field": field_name})
    return value.strip()


def require_name(value: str, field_name: str) -> str:
    name = require_non_empty(value, field_name)
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"{field_name} longer than {MAX_NAME_LENGTH} characters",
            details={"field": field_name},
        )
    return name


def require_integer(value: Any, field_name: str) -> int:
    # bool is an int subclass; a JSON true/false is not a valid value.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer", details={"field": field_name})
    return value


def require_int(value: Any, field_name: str) -> int:
    """An integer that fits a stored 64-bit column."""
    value = require_integer(value, field_name)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise ValidationError(f"{field_name} out of 64-bit range", details={"field": field_name})
    return value


def require_prefixes(values: Iterable[str]) -> tuple[str, ...]:
    """Normalize a prefix set to a sorted tuple of single characters."""
    out: set[str] = set()
    for v in values:
        if not isinstance(v, str) or len(v) != 1:
            raise ValidationError(f"Prefix must be a single character: {v!r}", details={"prefix": v})
        out.add(v)
    return tuple(sorted(out))
