"""Subcommand modules for recordcheck.

Provides register_commands() which uses deferred imports to keep
``recordcheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from recordcheck.commands.schemas import schemas

    cli.add_command(schemas)

    # --- Standalone commands ---
    from recordcheck.commands.rules import rules
    from recordcheck.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(rules)
