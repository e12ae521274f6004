"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Loads plugins and compiles the schema catalog
lazily, and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recordcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from recordcheck.config.settings import RecordcheckSettings
    from recordcheck.infrastructure.catalog import SchemaCatalog
    from recordcheck.plugins.manager import PluginManager
    from recordcheck.services.result import ServiceResult
    from recordcheck.services.validation import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins and schemas are loaded on first use so ``--help`` and
    ``--version`` never touch the config's schema sections.
    """

    def __init__(self, settings: RecordcheckSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._catalog: SchemaCatalog | None = None

        from recordcheck.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

    @property
    def plugins(self) -> PluginManager | None:
        """The loaded plugin manager, or None when plugins are disabled."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from recordcheck.plugins.manager import PluginManager

            pm = PluginManager()
            pm.discover_and_load(local_dir=self.settings.plugins_dir)
            self._plugins = pm
        return self._plugins

    @property
    def catalog(self) -> SchemaCatalog:
        """Schemas compiled from config (plugins load first so their rules resolve).

        Raises:
            click.ClickException: If a configured schema cannot be compiled.
        """
        if self._catalog is None:
            from recordcheck.domain.errors import SchemaError
            from recordcheck.infrastructure.catalog import SchemaCatalog

            _ = self.plugins  # registers plugin rules
            try:
                self._catalog = SchemaCatalog.from_config(self.settings.to_config())
            except SchemaError as exc:
                msg = f"Invalid schema configuration: {exc}"
                raise click.ClickException(msg) from exc
        return self._catalog

    def validation_service(self) -> ValidationService:
        from recordcheck.services.validation import ValidationService

        return ValidationService(self.catalog, self.plugins)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
