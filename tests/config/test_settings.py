"""Tests for RecordcheckSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from recordcheck.config.models import RecordcheckConfig
from recordcheck.config.settings import RecordcheckSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("RECORDCHECK_CONFIG", "RECORDCHECK_QUIET", "RECORDCHECK_PLUGINS__ENABLED"):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RecordcheckSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.schemas == {}
        assert settings.plugins.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RecordcheckSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_schemas(self, project_root: Path) -> None:
        settings = RecordcheckSettings.from_cli(project_root=project_root)
        assert settings.config_path == project_root / "recordcheck.toml"
        assert list(settings.schemas) == ["user", "tag"]
        assert settings.schemas["user"].fields["email"].required is True

    def test_project_root_from_config_location(
        self, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        nested = project_root / "data" / "incoming"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = RecordcheckSettings.from_cli()
        assert settings.project_root == project_root

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "rc.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[plugins]\nenabled = false\n")
        settings = RecordcheckSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.config_path == custom
        assert settings.plugins.enabled is False

    def test_missing_explicit_config_path(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            RecordcheckSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "recordcheck.toml").write_text("[schemas\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RecordcheckSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = RecordcheckSettings.from_cli(
            project_root=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECORDCHECK_QUIET", "true")
        settings = RecordcheckSettings.from_cli(project_root=tmp_path)
        assert settings.quiet is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "recordcheck.toml").write_text("[plugins]\nenabled = true\n")
        monkeypatch.setenv("RECORDCHECK_PLUGINS__ENABLED", "false")
        settings = RecordcheckSettings.from_cli(project_root=tmp_path)
        assert settings.plugins.enabled is False

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECORDCHECK_QUIET", "true")
        settings = RecordcheckSettings.from_cli(project_root=tmp_path, quiet=False)
        assert settings.quiet is False


class TestDerived:
    def test_to_config(self, project_root: Path) -> None:
        settings = RecordcheckSettings.from_cli(project_root=project_root)
        config = settings.to_config()
        assert isinstance(config, RecordcheckConfig)
        assert config.schemas == settings.schemas

    def test_plugins_dir_relative(self, tmp_path: Path) -> None:
        settings = RecordcheckSettings.from_cli(project_root=tmp_path)
        assert settings.plugins_dir == tmp_path / ".recordcheck" / "plugins"

    def test_plugins_dir_absolute(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere"
        toml = f'[plugins]\nlocal_dir = "{target.as_posix()}"\n'
        (tmp_path / "recordcheck.toml").write_text(toml)
        settings = RecordcheckSettings.from_cli(project_root=tmp_path)
        assert settings.plugins_dir == target
