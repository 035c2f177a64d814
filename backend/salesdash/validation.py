from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import DeclarativeMeta

from salesdash.errors import ValidationError

# SQLite and Postgres BIGINT both stop at signed 64-bit
SQL_INT_MIN = -(2 ** 63)
SQL_INT_MAX = 2 ** 63 - 1

_ASCII_INT = re.compile(r"-?[0-9]+")


class FieldError(ValueError):
    """Single-field coercion problem; collected into a ValidationError."""


@dataclass(frozen=True)
class ModelValidationPolicy:
    """
    Per-endpoint payload contract:
    - writable_fields: what clients are allowed to set
    - required_on_create: fields that must be present and non-blank on POST/PUT
    """
    writable_fields: frozenset[str]
    required_on_create: frozenset[str] = field(default_factory=frozenset)


def parse_int(value: Any, *, allow_negative: bool = True) -> int:
    """
    Strict integer parsing for ids and counters.

    Accepts ints and ASCII digit strings only (no floats, bools, or Unicode
    digits) within the signed 64-bit range. Raises FieldError otherwise.
    """
    if isinstance(value, bool):
        raise FieldError("must be an integer")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _ASCII_INT.fullmatch(value.strip()):
        number = int(value.strip())
    else:
        raise FieldError("must be an integer")

    if number < 0 and not allow_negative:
        raise FieldError("must be an integer")
    if not SQL_INT_MIN <= number <= SQL_INT_MAX:
        raise FieldError("is out of range")
    return number


def _columns_by_key(model: DeclarativeMeta) -> dict[str, Any]:
    mapper = model.__mapper__
    return {c.key: c for c in mapper.columns}


def _coerce_value(col, value: Any):
    coltype = col.type

    if value is None:
        return None

    if isinstance(coltype, Integer):
        return parse_int(value)

    if isinstance(coltype, Boolean):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in {"true", "false", "1", "0"}:
            return value.strip().lower() in {"true", "1"}
        raise FieldError("must be a boolean")

    if isinstance(coltype, (String, Text)):
        if not isinstance(value, (str, int, float)) or isinstance(value, bool):
            raise FieldError("must be a string")
        return str(value).strip()

    return value


def validate_payload(
    *,
    model: DeclarativeMeta,
    payload: Any,
    policy: ModelValidationPolicy,
) -> dict:
    """
    Validates + normalizes incoming JSON against SQLAlchemy column metadata
    (nullable, type, String length) and the endpoint policy.

    All problems are collected per field and raised together as a single
    ValidationError, so clients get every message in one round trip.
    Create and update both replace the writable fields, so required_on_create
    is enforced on every call.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON payload")

    cols = _columns_by_key(model)
    errors: dict[str, list[str]] = {}

    def add(key: str, message: str) -> None:
        errors.setdefault(key, []).append(f"{key} {message}")

    for key in sorted(policy.required_on_create):
        if key not in payload:
            add(key, "is required")

    values: dict = {}
    for key, raw in payload.items():
        if key not in policy.writable_fields or key not in cols:
            add(key, "is not an allowed field")
            continue

        col = cols[key]
        if raw is None:
            if not col.nullable or key in policy.required_on_create:
                add(key, "cannot be null")
            else:
                values[key] = None
            continue

        try:
            val = _coerce_value(col, raw)
        except FieldError as exc:
            add(key, str(exc))
            continue

        if isinstance(col.type, (String, Text)) and val == "":
            if not col.nullable or key in policy.required_on_create:
                add(key, "cannot be blank")
                continue

        if isinstance(col.type, String) and col.type.length and isinstance(val, str):
            if len(val) > col.type.length:
                add(key, f"exceeds max length {col.type.length}")
                continue

        values[key] = val

    if errors:
        raise ValidationError("Validation failed", fields=errors)
    return values
