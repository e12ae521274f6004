"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, recordcheck.toml only declares
schemas and overrides. A project with no config file has no schemas and
the built-in rules only.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class FieldConfig(BaseModel):
    """One entry of a ``[schemas.<name>.fields]`` table."""

    model_config = {"frozen": True, "extra": "forbid"}

    rule: str
    required: bool = False
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("rule")
    @classmethod
    def _rule_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "rule must not be empty"
            raise ValueError(msg)
        return value


class SchemaConfig(BaseModel):
    """[schemas.<name>] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    description: str = ""
    fields: dict[str, FieldConfig] = Field(default_factory=dict)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".recordcheck/plugins"


class RecordcheckConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    schemas: dict[str, SchemaConfig] = Field(default_factory=dict)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
