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

from base95.output.console import create_console, get_output, key_text

if TYPE_CHECKING:
    from rich.console import Console

    from base95.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode: bare keys, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("key", item.get("char", ""))) for item in items)

    if result.key is not None:
        return result.key
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="b95.ok")
    op = Text(f"  {result.op}", style="b95.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, name: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {name}: ", style="b95.field")
    if name in ("key", "left", "right", "from") and isinstance(value, str):
        v = key_text(value)
    elif name == "digits":
        v = Text(str(value), style="b95.digits")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with its timings."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.3f}ms", style=style)
    line.append(f"  {name}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="b95.error")
    op = Text(f"  {result.op}", style="b95.op")
    console.print(label, op, Text(" — "), Text(msg))

    if err and err.detail and (verbose or "position" in err.detail):
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v!r}" if k == "char" else f"    {k}: {v}"))


# ── Key renderers ─────────────────────────────────────────────────────


def _render_key(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render mid/avg/between/digits/parse results."""
    _status_line(console, result)
    for name in ("left", "right", "from", "key", "digits", "length"):
        if result.data.get(name) is not None:
            _field(console, name, result.data[name])
    if verbose:
        _render_meta(console, result)


def _render_chain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "toward", result.data.get("toward"))
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Step", justify="right")
    table.add_column("Key", style="b95.key", no_wrap=True)
    table.add_column("Digits", style="b95.digits")
    for item in result.data.get("items", []):
        table.add_row(
            str(item["step"]),
            Text(repr(item["key"])),
            Text(str(item["digits"])),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_alphabet(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Digit", justify="right")
    table.add_column("Char", style="b95.key")
    for item in result.data.get("items", []):
        table.add_row(str(item["digit"]), Text(repr(item["char"])))
    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} characters")


def _render_simulate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Summary of an insertion run; the full key list only when verbose."""
    _status_line(console, result)
    for name in ("seed", "inserts", "count", "sorted", "max_length", "mean_length"):
        _field(console, name, result.data.get(name))
    if verbose:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Index", justify="right")
        table.add_column("Key", style="b95.key", no_wrap=True)
        for item in result.data.get("items", []):
            table.add_row(str(item["index"]), Text(repr(item["key"])))
        console.print(table)
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for name, value in result.data.items():
        _field(console, name, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "mid": _render_key,
    "avg": _render_key,
    "avg_with_zero": _render_key,
    "avg_with_one": _render_key,
    "between": _render_key,
    "digits": _render_key,
    "parse": _render_key,
    "chain": _render_chain,
    "alphabet": _render_alphabet,
    "simulate": _render_simulate,
}
