"""Tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recordcheck.config.models import (
    FieldConfig,
    PluginsConfig,
    RecordcheckConfig,
    SchemaConfig,
)


class TestFieldConfig:
    def test_defaults(self) -> None:
        cfg = FieldConfig(rule="email")
        assert cfg.required is False
        assert cfg.options == {}

    def test_rule_stripped(self) -> None:
        assert FieldConfig(rule="  integer ").rule == "integer"

    def test_blank_rule_rejected(self) -> None:
        with pytest.raises(ValidationError, match="rule must not be empty"):
            FieldConfig(rule="   ")

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FieldConfig.model_validate({"rule": "email", "requried": True})

    def test_frozen(self) -> None:
        cfg = FieldConfig(rule="email")
        with pytest.raises(ValidationError):
            cfg.required = True  # type: ignore[misc]


class TestSchemaConfig:
    def test_field_order_preserved(self) -> None:
        cfg = SchemaConfig.model_validate(
            {"fields": {"z": {"rule": "email"}, "a": {"rule": "integer"}, "m": {"rule": "string"}}}
        )
        assert list(cfg.fields) == ["z", "a", "m"]

    def test_empty(self) -> None:
        cfg = SchemaConfig()
        assert cfg.description == ""
        assert cfg.fields == {}


class TestRecordcheckConfig:
    def test_defaults(self) -> None:
        cfg = RecordcheckConfig()
        assert cfg.schemas == {}
        assert cfg.plugins == PluginsConfig()
        assert cfg.plugins.enabled is True
        assert cfg.plugins.local_dir == ".recordcheck/plugins"

    def test_nested_parse(self) -> None:
        cfg = RecordcheckConfig.model_validate(
            {
                "schemas": {
                    "user": {
                        "description": "d",
                        "fields": {"email": {"rule": "email", "required": True}},
                    }
                },
                "plugins": {"enabled": False},
            }
        )
        assert cfg.schemas["user"].fields["email"].required is True
        assert cfg.plugins.enabled is False
