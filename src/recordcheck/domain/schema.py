"""Schema and field specification models.

A :class:`Schema` maps field names to :class:`FieldSpec` objects and is
immutable once built. Construction checks every specification so that a
broken schema fails at startup, never in the middle of a validate call.

Absent optional fields are reported with the :data:`NO_VALUE` sentinel,
which is distinct from ``None`` (a legitimate value some rules accept).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Final

from recordcheck.domain.errors import SchemaError
from recordcheck.domain.rules import Rule, rule_name


class NoValue(Enum):
    """Type of the :data:`NO_VALUE` sentinel."""

    NO_VALUE = "no_value"

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE: Final = NoValue.NO_VALUE


@dataclass(frozen=True)
class FieldSpec:
    """A rule plus whether the field must be present."""

    rule: Rule[Any]
    required: bool = False

    def __post_init__(self) -> None:
        if self.rule is None:
            msg = "FieldSpec.rule must not be None"
            raise SchemaError(msg)
        if not callable(getattr(self.rule, "validate", None)):
            msg = f"{type(self.rule).__name__} has no callable validate() method"
            raise SchemaError(msg)
        if not isinstance(self.required, bool):
            msg = f"FieldSpec.required must be a bool, got {self.required!r}"
            raise SchemaError(msg)

    def describe(self) -> dict[str, Any]:
        return {"rule": rule_name(self.rule), "required": self.required}


def required(rule: Rule[Any]) -> FieldSpec:
    """Shorthand for ``FieldSpec(rule, required=True)``."""
    return FieldSpec(rule, required=True)


def optional(rule: Rule[Any]) -> FieldSpec:
    """Shorthand for ``FieldSpec(rule, required=False)``."""
    return FieldSpec(rule, required=False)


class Schema(Mapping[str, FieldSpec]):
    """Immutable, ordered mapping of field name to :class:`FieldSpec`.

    Iteration follows declaration order, which is also the order in which
    the validator reports field errors.

    Raises:
        SchemaError: If a name is not a non-empty string or a value is not
            a :class:`FieldSpec`.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, FieldSpec] | None = None, /, **kwargs: FieldSpec) -> None:
        merged: dict[str, FieldSpec] = {}
        for source in (fields or {}, kwargs):
            for name, spec in source.items():
                if not isinstance(name, str) or not name.strip():
                    msg = f"Field names must be non-empty strings, got {name!r}"
                    raise SchemaError(msg)
                if not isinstance(spec, FieldSpec):
                    msg = f"Field {name!r} must be a FieldSpec, got {type(spec).__name__}"
                    raise SchemaError(msg)
                if name in merged:
                    msg = f"Field {name!r} declared twice"
                    raise SchemaError(msg)
                merged[name] = spec
        self._fields: Mapping[str, FieldSpec] = MappingProxyType(merged)

    def __getitem__(self, name: str) -> FieldSpec:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._fields.items())
        return f"Schema({inner})"

    @property
    def required_fields(self) -> list[str]:
        return [name for name, spec in self._fields.items() if spec.required]

    def describe(self) -> list[dict[str, Any]]:
        """Return ``[{"name", "rule", "required"}, ...]`` in declaration order."""
        return [{"name": name, **spec.describe()} for name, spec in self._fields.items()]
