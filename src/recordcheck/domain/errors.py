"""Validation errors reported by the engine, plus schema construction errors.

Three kinds of validation error, all collected rather than raised:

- missing required field
- field value rejected by its rule
- keys not declared in the schema (one aggregated error)

``SchemaError`` is different: it signals a programmer mistake while
building a schema and is raised immediately.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Self

from pydantic import BaseModel

from recordcheck.domain.rules import RuleFailure


class SchemaError(ValueError):
    """A schema or field specification is malformed."""


class ErrorKind(StrEnum):
    """Category of a validation error."""

    MISSING_REQUIRED = "missing_required"
    INVALID_VALUE = "invalid_value"
    UNEXPECTED_KEYS = "unexpected_keys"


class FieldError(BaseModel):
    """One validation problem, tagged with the field it concerns.

    Attributes:
        kind: Error category.
        message: Human-readable message; also what ``str()`` returns.
        field_name: Offending field, or None for the unexpected-keys error.
        cause: The rule's own reason (invalid values only).
        keys: Undeclared keys (unexpected-keys error only).
    """

    model_config = {"frozen": True}

    kind: ErrorKind
    message: str
    field_name: str | None = None
    cause: str | None = None
    keys: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.message

    @classmethod
    def missing(cls, name: str) -> Self:
        return cls(
            kind=ErrorKind.MISSING_REQUIRED,
            message=f'required key "{name}" missing',
            field_name=name,
        )

    @classmethod
    def invalid(cls, name: str, failure: RuleFailure) -> Self:
        return cls(
            kind=ErrorKind.INVALID_VALUE,
            message=f"key {name} has error: {failure.reason}",
            field_name=name,
            cause=failure.reason,
        )

    @classmethod
    def unexpected(cls, keys: Iterable[object]) -> Self:
        names = tuple(str(k) for k in keys)
        return cls(
            kind=ErrorKind.UNEXPECTED_KEYS,
            message=f"extra keys: {', '.join(names)}",
            keys=names,
        )
