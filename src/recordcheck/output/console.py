"""Rich Console factory and theme for recordcheck output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RECORDCHECK_THEME = Theme(
    {
        "rc.ok": "bold green",
        "rc.error": "bold red",
        "rc.warning": "bold yellow",
        "rc.op": "bold cyan",
        "rc.key": "dim",
        "rc.field": "bold blue",
        "rc.rule": "magenta",
        "rc.path": "dim",
        "rc.none": "dim italic",
    }
)

_KIND_STYLES: dict[str, str] = {
    "missing_required": "rc.error",
    "invalid_value": "rc.warning",
    "unexpected_keys": "rc.error",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=RECORDCHECK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a validation error kind."""
    return _KIND_STYLES.get(kind, "")
