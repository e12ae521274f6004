"""Validation rules: one untyped value in, a typed value or a failure out.

A rule is anything with a ``validate(value)`` method. Rules never raise:
a rejected value is reported by returning a :class:`RuleFailure`, which
the engine folds into the error list. Absence of a key is the engine's
concern, so rules only ever see values that were actually supplied.

INVARIANT: Rules are immutable and stateless. One instance may be shared
by any number of schemas and concurrent validation calls.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable

EMAIL_PATTERN: re.Pattern[str] = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class RuleFailure:
    """A rejected value and the human-readable reason it was rejected."""

    value: Any
    reason: str

    def __str__(self) -> str:
        return self.reason


@runtime_checkable
class Rule[T](Protocol):
    """Single-method validation capability.

    Returns the coerced value on success, or a :class:`RuleFailure`.
    """

    def validate(self, value: Any) -> T | RuleFailure: ...


def is_failure(outcome: object) -> bool:
    """Whether a rule outcome is a rejection rather than a coerced value."""
    return isinstance(outcome, RuleFailure)


def _describe(value: Any) -> str:
    """Render *value* for a failure reason without ever raising.

    ``str()`` can fail, e.g. on an int past the interpreter's digit limit
    or an object whose ``__str__`` raises.
    """
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def rule_name(rule: object) -> str:
    """Return the registered name of *rule*, falling back to its class name."""
    name = getattr(rule, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(rule).__name__


# ---------------------------------------------------------------------------
# Built-in rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IntegerRule:
    """Accept whole numbers.

    ``int`` passes through unchanged; a ``float`` with no fractional part
    is coerced to ``int``. ``bool`` is rejected even though it subclasses
    ``int`` in Python.

    Examples:
        >>> IntegerRule().validate(30)
        30
        >>> IntegerRule().validate(2.0)
        2
        >>> IntegerRule().validate(1.5)
        RuleFailure(value=1.5, reason='1.5 is not an integer')
    """

    name: ClassVar[str] = "integer"

    def validate(self, value: Any) -> int | RuleFailure:
        if isinstance(value, bool):
            return RuleFailure(value, f"{_describe(value)} is not an integer")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and math.isfinite(value) and value.is_integer():
            return int(value)
        return RuleFailure(value, f"{_describe(value)} is not an integer")


@dataclass(frozen=True)
class EmailRule:
    """Accept strings shaped like ``local@domain.tld``.

    The check is structural only: no whitespace, exactly one ``@``
    between non-empty parts, and at least one dot in the domain part.
    """

    name: ClassVar[str] = "email"

    def validate(self, value: Any) -> str | RuleFailure:
        if isinstance(value, str) and EMAIL_PATTERN.fullmatch(value):
            return value
        return RuleFailure(value, f"{_describe(value)} is not an email")


@dataclass(frozen=True)
class StringRule:
    """Accept strings, optionally bounded in length."""

    name: ClassVar[str] = "string"

    min_length: int = 0
    max_length: int | None = None

    def __post_init__(self) -> None:
        if self.min_length < 0:
            msg = f"min_length must be >= 0, got {self.min_length}"
            raise ValueError(msg)
        if self.max_length is not None and self.max_length < self.min_length:
            msg = f"max_length {self.max_length} is below min_length {self.min_length}"
            raise ValueError(msg)

    def validate(self, value: Any) -> str | RuleFailure:
        if not isinstance(value, str):
            return RuleFailure(value, f"{_describe(value)} is not a string")
        if len(value) < self.min_length:
            return RuleFailure(value, f"{value!r} is shorter than {self.min_length} characters")
        if self.max_length is not None and len(value) > self.max_length:
            return RuleFailure(value, f"{value!r} is longer than {self.max_length} characters")
        return value


@dataclass(frozen=True)
class BooleanRule:
    """Accept only real booleans. ``0``, ``1`` and ``"true"`` are rejected."""

    name: ClassVar[str] = "boolean"

    def validate(self, value: Any) -> bool | RuleFailure:
        if isinstance(value, bool):
            return value
        return RuleFailure(value, f"{_describe(value)} is not a boolean")


@dataclass(frozen=True, init=False)
class ChoiceRule:
    """Accept one of a fixed set of values."""

    name: ClassVar[str] = "choice"

    choices: tuple[Any, ...]

    def __init__(self, choices: Sequence[Any]) -> None:
        if isinstance(choices, str) or not choices:
            msg = "choices must be a non-empty sequence of values"
            raise ValueError(msg)
        object.__setattr__(self, "choices", tuple(choices))

    def validate(self, value: Any) -> Any:
        for choice in self.choices:
            # bool == int in Python; True must not match a choice of 1.
            if type(choice) is type(value) and choice == value:
                return value
        allowed = ", ".join(_describe(c) for c in self.choices)
        return RuleFailure(value, f"{_describe(value)} is not one of: {allowed}")
