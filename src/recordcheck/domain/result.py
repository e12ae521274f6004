"""Helpers for telling the two validation outcomes apart.

``validate`` returns either a normalized record or a list of errors. The
checks here look at the elements, not just the container type, so a
record can never be mistaken for an error list.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard

from recordcheck.domain.errors import FieldError
from recordcheck.domain.schema import NoValue
from recordcheck.domain.validator import NormalizedRecord


def has_errors(outcome: object) -> TypeGuard[list[FieldError]]:
    """True when *outcome* is a non-empty list made only of :class:`FieldError`."""
    return (
        isinstance(outcome, list)
        and len(outcome) > 0
        and all(isinstance(item, FieldError) for item in outcome)
    )


def is_valid(outcome: object) -> TypeGuard[NormalizedRecord]:
    """True when *outcome* is a normalized record."""
    return isinstance(outcome, dict) and not has_errors(outcome)


def present_values(record: Mapping[str, Any]) -> dict[str, Any]:
    """Drop ``NO_VALUE`` slots, leaving an input record fit for re-validation."""
    return {k: v for k, v in record.items() if not isinstance(v, NoValue)}


def to_jsonable(record: Mapping[str, Any]) -> dict[str, Any]:
    """Render ``NO_VALUE`` as ``None`` for JSON and console output."""
    return {k: (None if isinstance(v, NoValue) else v) for k, v in record.items()}


def error_messages(errors: list[FieldError]) -> list[str]:
    return [e.message for e in errors]
