"""Click base classes for recordcheck commands.

Commands declare their usage examples next to the decorator; the
``--examples`` flag prints them, and ``--help`` ends with a one-line
pointer to that flag instead of the full list.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

_EXAMPLES_HINT = "Run with --examples for usage examples."


class _ExamplesMixin:
    """Adds an eager ``--examples`` flag when ``examples=`` is passed."""

    examples: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if not self.examples:
            return
        cmd: click.Command = self  # type: ignore[assignment]
        if not cmd.epilog:
            cmd.epilog = _EXAMPLES_HINT
        cmd.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._show_examples,
                help="Show usage examples.",
            )
        )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in (self.examples or "").splitlines():
            click.echo(f"  {line}")
        ctx.exit(0)


class RcCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class RcGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`RcCommand`."""

    command_class = RcCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
