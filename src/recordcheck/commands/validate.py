"""Command: validate records against a named schema."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from recordcheck.commands._base import RcCommand

if TYPE_CHECKING:
    from recordcheck.commands._context import AppContext


@click.command(
    cls=RcCommand,
    examples="""\
  recordcheck validate user signups.json
  recordcheck validate user signups.yaml
  recordcheck validate user --data '{"email": "a@b.com", "age": 30}'
  recordcheck --json validate user signups.json
  recordcheck -q validate user signups.json""",
)
@click.argument("schema_name")
@click.argument("path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--data", "inline", default=None, help="Validate an inline JSON object instead of a file.")
@click.pass_obj
def validate(app: AppContext, schema_name: str, path: Path | None, inline: str | None) -> None:
    """Validate a JSON/YAML file, or an inline JSON object, against SCHEMA_NAME."""
    from recordcheck.infrastructure.records import RecordLoadError, parse_inline

    if (path is None) == (inline is None):
        msg = "Provide exactly one of PATH or --data."
        raise click.UsageError(msg)

    svc = app.validation_service()
    if inline is not None:
        try:
            record = parse_inline(inline)
        except RecordLoadError as exc:
            raise click.BadParameter(str(exc), param_hint="--data") from exc
        app.emit(svc.validate_record(schema_name, record))
    else:
        assert path is not None
        app.emit(svc.validate_file(schema_name, path))
