"""Tests for the schema catalog."""

from __future__ import annotations

import pytest

from recordcheck.config.models import FieldConfig, RecordcheckConfig, SchemaConfig
from recordcheck.domain.errors import SchemaError
from recordcheck.domain.registry import register_rule
from recordcheck.domain.rules import ChoiceRule, EmailRule, IntegerRule, RuleFailure, StringRule
from recordcheck.infrastructure.catalog import SchemaCatalog, compile_schema


class TestCompileSchema:
    def test_builds_rules_in_order(self) -> None:
        cfg = SchemaConfig(
            fields={
                "email": FieldConfig(rule="email", required=True),
                "age": FieldConfig(rule="integer"),
            }
        )
        schema = compile_schema("user", cfg)
        assert list(schema) == ["email", "age"]
        assert schema["email"].rule == EmailRule()
        assert schema["email"].required is True
        assert schema["age"].rule == IntegerRule()
        assert schema["age"].required is False

    def test_options_forwarded(self) -> None:
        cfg = SchemaConfig(fields={"n": FieldConfig(rule="string", options={"max_length": 4})})
        assert compile_schema("s", cfg)["n"].rule == StringRule(max_length=4)

    def test_unknown_rule_names_schema_and_field(self) -> None:
        cfg = SchemaConfig(fields={"id": FieldConfig(rule="uuid")})
        with pytest.raises(SchemaError, match=r"schema 'thing', field 'id': Unknown rule 'uuid'"):
            compile_schema("thing", cfg)

    def test_bad_options(self) -> None:
        cfg = SchemaConfig(fields={"v": FieldConfig(rule="choice", options={"choices": []})})
        with pytest.raises(SchemaError, match="field 'v': Invalid options"):
            compile_schema("thing", cfg)

    def test_empty_field_name(self) -> None:
        cfg = SchemaConfig(fields={"": FieldConfig(rule="email")})
        with pytest.raises(SchemaError, match="schema 'thing'"):
            compile_schema("thing", cfg)

    def test_plugin_rule_resolves_once_registered(self) -> None:
        class Upper:
            def validate(self, value: object) -> str | RuleFailure:
                if isinstance(value, str) and value.isupper():
                    return value
                return RuleFailure(value, f"{value} is not upper case")

        register_rule("upper", Upper)
        cfg = SchemaConfig(fields={"code": FieldConfig(rule="upper")})
        assert isinstance(compile_schema("c", cfg)["code"].rule, Upper)


class TestSchemaCatalog:
    def test_from_config(self, catalog: SchemaCatalog) -> None:
        assert len(catalog) == 2
        assert "user" in catalog
        assert list(catalog) == ["user", "tag"]
        assert catalog.names() == ["tag", "user"]

    def test_description(self, catalog: SchemaCatalog) -> None:
        assert catalog.description("user") == "Sign-up payload"
        assert catalog.description("tag") == ""
        assert catalog.description("missing") == ""

    def test_choice_options(self, catalog: SchemaCatalog) -> None:
        assert catalog["tag"]["visibility"].rule == ChoiceRule(["public", "private"])

    def test_describe(self, catalog: SchemaCatalog) -> None:
        assert catalog.describe("user") == {
            "name": "user",
            "description": "Sign-up payload",
            "fields": [
                {"name": "email", "rule": "email", "required": True},
                {"name": "age", "rule": "integer", "required": False},
            ],
            "required": ["email"],
        }

    def test_describe_unknown(self, catalog: SchemaCatalog) -> None:
        with pytest.raises(KeyError):
            catalog.describe("missing")

    def test_empty_config(self) -> None:
        catalog = SchemaCatalog.from_config(RecordcheckConfig())
        assert len(catalog) == 0
        assert catalog.names() == []

    def test_read_only(self, catalog: SchemaCatalog) -> None:
        with pytest.raises(TypeError):
            catalog["new"] = catalog["user"]  # type: ignore[index]
