"""SchemaCatalog: named schemas compiled once from configuration.

Every ``[schemas.<name>]`` section is turned into an immutable
:class:`~recordcheck.domain.schema.Schema` when the catalog is built, so
unknown rule names and bad rule options surface at startup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Self

from recordcheck.config.models import RecordcheckConfig, SchemaConfig
from recordcheck.domain.errors import SchemaError
from recordcheck.domain.registry import build_rule
from recordcheck.domain.schema import FieldSpec, Schema

logger = logging.getLogger(__name__)


def compile_schema(name: str, config: SchemaConfig) -> Schema:
    """Build a :class:`Schema` from one config section.

    Raises:
        SchemaError: Naming the schema and field that could not be built.
    """
    fields: dict[str, FieldSpec] = {}
    for field_name, field_cfg in config.fields.items():
        try:
            rule = build_rule(field_cfg.rule, field_cfg.options)
        except SchemaError as exc:
            msg = f"schema {name!r}, field {field_name!r}: {exc}"
            raise SchemaError(msg) from exc
        fields[field_name] = FieldSpec(rule, required=field_cfg.required)
    try:
        return Schema(fields)
    except SchemaError as exc:
        msg = f"schema {name!r}: {exc}"
        raise SchemaError(msg) from exc


class SchemaCatalog(Mapping[str, Schema]):
    """Read-only mapping of schema name to compiled :class:`Schema`."""

    def __init__(
        self,
        schemas: Mapping[str, Schema],
        descriptions: Mapping[str, str] | None = None,
    ) -> None:
        self._schemas: Mapping[str, Schema] = MappingProxyType(dict(schemas))
        self._descriptions: Mapping[str, str] = MappingProxyType(dict(descriptions or {}))

    @classmethod
    def from_config(cls, config: RecordcheckConfig) -> Self:
        schemas: dict[str, Schema] = {}
        descriptions: dict[str, str] = {}
        for name, schema_cfg in config.schemas.items():
            schemas[name] = compile_schema(name, schema_cfg)
            descriptions[name] = schema_cfg.description
            logger.debug("Compiled schema %s with %d fields", name, len(schemas[name]))
        return cls(schemas, descriptions)

    def __getitem__(self, name: str) -> Schema:
        return self._schemas[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def names(self) -> list[str]:
        return sorted(self._schemas)

    def description(self, name: str) -> str:
        return self._descriptions.get(name, "")

    def describe(self, name: str) -> dict[str, Any]:
        """Summarize one schema for output.

        Raises:
            KeyError: If *name* is not in the catalog.
        """
        schema = self._schemas[name]
        return {
            "name": name,
            "description": self.description(name),
            "fields": schema.describe(),
            "required": schema.required_fields,
        }
