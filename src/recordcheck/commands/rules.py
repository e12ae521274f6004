"""Command: list rule names available to schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recordcheck.commands._base import RcCommand

if TYPE_CHECKING:
    from recordcheck.commands._context import AppContext


@click.command(cls=RcCommand, examples="  recordcheck rules\n  recordcheck --json rules")
@click.pass_obj
def rules(app: AppContext) -> None:
    """List built-in and plugin-provided rules."""
    app.emit(app.validation_service().list_rules())
