"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from recordcheck.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from recordcheck.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="rc.ok")
    op = Text(f"  {result.op}", style="rc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rc.key")
    if isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":"), default=str), style=style)
    elif key == "path":
        v = Text(str(value), style="rc.path")
    else:
        v = Text(str(value), style=style)
    console.print(k, v, end="")
    console.print()


def _print_field_errors(console: Console, errors: list[dict[str, Any]], *, indent: int = 2) -> None:
    """Print one line per validation error, styled by kind."""
    prefix = " " * indent
    for err in errors:
        kind = str(err.get("kind", ""))
        style = style_for_kind(kind)
        line = Text(prefix)
        line.append(kind or "error", style=style)
        line.append(f": {err.get('message', '')}")
        console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rc.error")
    op = Text(f"  {result.op}", style="rc.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if err is None:
        return

    detail = err.detail
    if isinstance(detail.get("errors"), list):
        _print_field_errors(console, detail["errors"])
    if isinstance(detail.get("results"), list):
        for item in detail["results"]:
            console.print(Text(f"  record {item.get('index')}:", style="bold"))
            _print_field_errors(console, item.get("errors", []), indent=4)

    shown = {"errors", "results"}
    extra = {k: v for k, v in detail.items() if k not in shown}
    if verbose and extra:
        console.print(Text("  detail:", style="dim"))
        for k, v in extra.items():
            console.print(Text(f"    {k}: {v}"))


# ── Schema renderers ──────────────────────────────────────────────────


def _render_list_schemas(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the catalog as a table."""
    items = result.data.get("items", [])
    if not items:
        console.print("No schemas configured.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Schema", style="rc.field", no_wrap=True)
    table.add_column("Fields", justify="right")
    table.add_column("Description")
    for item in items:
        table.add_row(
            Text(str(item.get("name", ""))),
            Text(str(item.get("fields", ""))),
            Text(str(item.get("description", ""))),
        )
    console.print(table)


def _render_describe_schema(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render one schema's fields in declaration order."""
    d = result.data
    console.print(Text(str(d.get("name", "")), style="bold"))
    if d.get("description"):
        console.print(Text(str(d["description"]), style="dim"))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="rc.field", no_wrap=True)
    table.add_column("Rule", style="rc.rule")
    table.add_column("Required")
    for f in d.get("fields", []):
        table.add_row(
            Text(str(f.get("name", ""))),
            Text(str(f.get("rule", ""))),
            "yes" if f.get("required") else "no",
        )
    console.print(table)


def _render_list_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for item in result.data.get("items", []):
        origin = "built-in" if item.get("builtin") else "plugin"
        line = Text("  ")
        line.append(str(item.get("name", "")), style="rc.rule")
        line.append(f"  {origin}", style="dim")
        console.print(line)


# ── Validation renderers ──────────────────────────────────────────────


def _render_validate_record(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render the normalized record, marking absent optional fields."""
    _status_line(console, result)
    _field(console, "schema", result.data.get("schema", ""))
    absent = set(result.data.get("absent", []))
    for key, value in result.data.get("record", {}).items():
        if key in absent:
            _field(console, key, "(no value)", style="rc.none")
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_validate_file(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    for key in ("schema", "path", "count"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        for idx, record in enumerate(result.data.get("records", [])):
            _field(console, f"record {idx}", record)
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_schemas": _render_list_schemas,
    "describe_schema": _render_describe_schema,
    "list_rules": _render_list_rules,
    "validate_record": _render_validate_record,
    "validate_file": _render_validate_file,
}
