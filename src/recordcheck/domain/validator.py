"""Validation engine: one schema against one input record.

The engine walks the schema once in declaration order, then diffs the
input keys against the schema keys. Every problem is collected so the
caller sees the complete list in a single pass. The outcome is either a
normalized record holding exactly the schema's keys, or a non-empty list
of :class:`FieldError`, never both.

INVARIANT: ``validate`` is a pure function of (schema, record). It does
not mutate the record and keeps no state between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from recordcheck.domain.errors import FieldError
from recordcheck.domain.rules import RuleFailure
from recordcheck.domain.schema import NO_VALUE, Schema

type NormalizedRecord = dict[str, Any]
type ValidationOutcome = NormalizedRecord | list[FieldError]


def validate(schema: Schema, record: Mapping[str, Any]) -> ValidationOutcome:
    """Validate *record* against *schema*.

    Returns:
        The normalized record (absent optional fields hold ``NO_VALUE``)
        when there are no errors, otherwise the list of errors ordered by
        schema field, with the unexpected-keys error last.

    Raises:
        TypeError: If *record* is not a mapping.
    """
    if not isinstance(record, Mapping):
        msg = f"record must be a mapping, got {type(record).__name__}"
        raise TypeError(msg)

    errors: list[FieldError] = []
    normalized: NormalizedRecord = {}

    for name, spec in schema.items():
        if name not in record:
            if spec.required:
                errors.append(FieldError.missing(name))
            else:
                normalized[name] = NO_VALUE
            continue

        outcome = spec.rule.validate(record[name])
        if isinstance(outcome, RuleFailure):
            errors.append(FieldError.invalid(name, outcome))
        else:
            normalized[name] = outcome

    extra = [key for key in record if key not in schema]
    if extra:
        errors.append(FieldError.unexpected(extra))

    if errors:
        return errors
    return normalized


class Validator:
    """A schema bound once and applied to many records.

    Usage::

        users = Validator(Schema(email=required(EmailRule()), age=optional(IntegerRule())))
        outcome = users.validate({"email": "a@b.com", "age": 30})
        if is_valid(outcome):
            ...
    """

    __slots__ = ("_schema",)

    def __init__(self, schema: Schema | Mapping[str, Any]) -> None:
        self._schema = schema if isinstance(schema, Schema) else Schema(schema)

    @property
    def schema(self) -> Schema:
        return self._schema

    def validate(self, record: Mapping[str, Any]) -> ValidationOutcome:
        return validate(self._schema, record)
