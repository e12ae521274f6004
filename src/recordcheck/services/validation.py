"""ValidationService: schema lookup and record validation.

Wraps the pure domain engine with catalog lookup, file loading, plugin
notification and the ServiceResult contract. Validation failures are a
normal ``ok=False`` result carrying every error; nothing here raises for
bad input data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from recordcheck.domain.errors import FieldError
from recordcheck.domain.registry import BUILTIN_RULES, list_rules
from recordcheck.domain.result import has_errors, to_jsonable
from recordcheck.domain.schema import NO_VALUE
from recordcheck.domain.validator import validate
from recordcheck.infrastructure.records import RecordLoadError, load_records
from recordcheck.services.base import BaseService
from recordcheck.services.result import ServiceResult

logger = logging.getLogger(__name__)

UNKNOWN_SCHEMA = "UNKNOWN_SCHEMA"
INVALID_RECORD = "INVALID_RECORD"
VALIDATION_FAILED = "VALIDATION_FAILED"
LOAD_FAILED = "LOAD_FAILED"


def _dump_errors(errors: list[FieldError]) -> list[dict[str, Any]]:
    return [e.model_dump(mode="json") for e in errors]


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


class ValidationService(BaseService):
    """Validates records against named schemas from the catalog."""

    # ------------------------------------------------------------------
    # Schema inspection
    # ------------------------------------------------------------------

    def list_schemas(self) -> ServiceResult:
        """List every schema in the catalog."""
        items = [
            {
                "name": name,
                "description": self._catalog.description(name),
                "fields": len(self._catalog[name]),
            }
            for name in self._catalog.names()
        ]
        return ServiceResult(
            ok=True,
            op="list_schemas",
            data={"items": items, "count": len(items)},
        )

    def describe_schema(self, name: str) -> ServiceResult:
        """Show the fields, rules and required flags of one schema."""
        if name not in self._catalog:
            return self._unknown_schema("describe_schema", name)
        return ServiceResult(ok=True, op="describe_schema", data=self._catalog.describe(name))

    def list_rules(self) -> ServiceResult:
        """List rule names usable in config, built-in and plugin-provided."""
        items = [{"name": name, "builtin": name in BUILTIN_RULES} for name in list_rules()]
        return ServiceResult(
            ok=True,
            op="list_rules",
            data={"items": items, "count": len(items)},
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_record(self, name: str, record: Any) -> ServiceResult:
        """Validate one already-decoded record against schema *name*."""
        op = "validate_record"
        if name not in self._catalog:
            return self._unknown_schema(op, name)
        if not isinstance(record, Mapping):
            return ServiceResult.failure(
                op, INVALID_RECORD, f"Record must be a mapping, got {type(record).__name__}"
            )

        warnings: list[str] = []
        outcome = validate(self._catalog[name], record)
        errors = outcome if has_errors(outcome) else []
        self._dispatch_event(
            "post_validate",
            {"schema_name": name, "ok": not errors, "error_count": len(errors)},
            warnings,
        )

        if errors:
            logger.debug("Record rejected by schema %s: %d errors", name, len(errors))
            return ServiceResult.failure(
                op,
                VALIDATION_FAILED,
                f"{_plural(len(errors), 'validation error')} for schema {name!r}",
                detail={"schema": name, "errors": _dump_errors(errors)},
                warnings=warnings,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "schema": name,
                "record": to_jsonable(outcome),
                "absent": [k for k, v in outcome.items() if v is NO_VALUE],
            },
            warnings=warnings,
        )

    def validate_file(self, name: str, path: Path) -> ServiceResult:
        """Validate every record in a JSON or YAML file against schema *name*.

        All records are checked even after the first failure; the error
        detail lists the failing record indexes with their errors.
        """
        op = "validate_file"
        if name not in self._catalog:
            return self._unknown_schema(op, name)

        try:
            records = load_records(path)
        except RecordLoadError as exc:
            return ServiceResult.failure(op, LOAD_FAILED, str(exc), detail={"path": str(path)})

        schema = self._catalog[name]
        warnings: list[str] = []
        valid: list[dict[str, Any]] = []
        absent: list[list[str]] = []
        failures: list[dict[str, Any]] = []

        for index, record in enumerate(records):
            outcome = validate(schema, record)
            if has_errors(outcome):
                failures.append({"index": index, "errors": _dump_errors(outcome)})
                error_count = len(outcome)
            else:
                valid.append(to_jsonable(outcome))
                absent.append([k for k, v in outcome.items() if v is NO_VALUE])
                error_count = 0
            self._dispatch_event(
                "post_validate",
                {"schema_name": name, "ok": error_count == 0, "error_count": error_count},
                warnings,
            )

        logger.debug(
            "Validated %d records from %s: %d invalid", len(records), path, len(failures)
        )

        if failures:
            return ServiceResult.failure(
                op,
                VALIDATION_FAILED,
                f"{_plural(len(failures), 'invalid record')} of {len(records)} for schema {name!r}",
                detail={
                    "schema": name,
                    "path": str(path),
                    "count": len(records),
                    "invalid": len(failures),
                    "results": failures,
                },
                warnings=warnings,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "schema": name,
                "path": str(path),
                "count": len(records),
                "records": valid,
                "absent": absent,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _unknown_schema(self, op: str, name: str) -> ServiceResult:
        return ServiceResult.failure(
            op,
            UNKNOWN_SCHEMA,
            f"No schema named {name!r}",
            detail={"known": self._catalog.names()},
        )
