"""Shared pytest fixtures and test helpers for recordcheck tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from recordcheck.config.models import RecordcheckConfig
from recordcheck.domain import registry
from recordcheck.domain.rules import EmailRule, IntegerRule
from recordcheck.domain.schema import Schema, optional, required
from recordcheck.infrastructure.catalog import SchemaCatalog

USER_TOML = """\
[schemas.user]
description = "Sign-up payload"

[schemas.user.fields]
email = { rule = "email", required = true }
age = { rule = "integer" }

[schemas.tag]

[schemas.tag.fields]
name = { rule = "string", required = true, options = { min_length = 1, max_length = 20 } }
visibility = { rule = "choice", options = { choices = ["public", "private"] } }
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_rule_registry() -> Generator[None]:
    """Undo any rule registrations a test (or a loaded plugin) makes."""
    snapshot = dict(registry.RULE_REGISTRY)
    yield
    registry.RULE_REGISTRY.clear()
    registry.RULE_REGISTRY.update(snapshot)


@pytest.fixture
def user_schema() -> Schema:
    """``{email: required Email, age: optional Integer}``."""
    return Schema(email=required(EmailRule()), age=optional(IntegerRule()))


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory holding a recordcheck.toml."""
    (tmp_path / "recordcheck.toml").write_text(USER_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def catalog() -> SchemaCatalog:
    """Catalog compiled from :data:`USER_TOML`."""
    import tomllib

    config = RecordcheckConfig.model_validate(tomllib.loads(USER_TOML))
    return SchemaCatalog.from_config(config)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project so the CLI discovers its recordcheck.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.delenv("RECORDCHECK_CONFIG", raising=False)
    monkeypatch.chdir(project_root)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """Every CLI invocation reconfigures logging; put the root logger back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
