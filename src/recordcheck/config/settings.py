"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``RECORDCHECK_*`` prefix
  3. TOML file: ``recordcheck.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`recordcheck.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from recordcheck.config.discovery import ConfigFileError, find_config, read_toml
from recordcheck.config.models import PluginsConfig, RecordcheckConfig, SchemaConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``recordcheck.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = read_toml(toml_path)
            except ConfigFileError as exc:
                import click

                raise click.ClickException(str(exc)) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RecordcheckSettings(BaseSettings):
    """Unified settings for the recordcheck CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        project_root: Directory holding ``recordcheck.toml`` (or CWD if
            no config was found). Relative paths in config resolve here.
        config_path: The config file actually loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RECORDCHECK_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    schemas: dict[str, SchemaConfig] = Field(default_factory=dict)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> RecordcheckSettings:
        """Construct settings from a CLI invocation.

        Discovers ``recordcheck.toml`` via walk-up (or explicit
        *config_path*), resolves *project_root* from the config file's
        parent directory, and merges CLI flags as highest-priority
        overrides.

        Raises:
            click.ClickException: If an explicit *config_path* does not
                exist or the TOML cannot be parsed.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                import click

                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    def to_config(self) -> RecordcheckConfig:
        """Project the TOML-backed sections onto a :class:`RecordcheckConfig`."""
        return RecordcheckConfig(schemas=self.schemas, plugins=self.plugins)

    @property
    def plugins_dir(self) -> Path:
        local = Path(self.plugins.local_dir)
        return local if local.is_absolute() else self.project_root / local
