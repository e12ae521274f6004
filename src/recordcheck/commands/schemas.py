"""Command group: inspect configured schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recordcheck.commands._base import RcGroup

if TYPE_CHECKING:
    from recordcheck.commands._context import AppContext

_SCHEMAS_EXAMPLES = """\
  recordcheck schemas list
  recordcheck schemas show user
  recordcheck --json schemas show user"""


@click.group(cls=RcGroup, examples=_SCHEMAS_EXAMPLES)
@click.pass_obj
def schemas(app: AppContext) -> None:
    """List and describe schemas declared in recordcheck.toml."""


@schemas.command("list", examples="  recordcheck schemas list\n  recordcheck -q schemas list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List configured schemas."""
    app.emit(app.validation_service().list_schemas())


@schemas.command(examples="  recordcheck schemas show user")
@click.argument("name")
@click.pass_obj
def show(app: AppContext, name: str) -> None:
    """Show the fields of schema NAME."""
    app.emit(app.validation_service().describe_schema(name))
