"""Rich Console factory and theme for base95 output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

BASE95_THEME = Theme(
    {
        "b95.ok": "bold green",
        "b95.error": "bold red",
        "b95.warning": "bold yellow",
        "b95.op": "bold cyan",
        "b95.field": "dim",
        "b95.key": "bold blue",
        "b95.digits": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BASE95_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def key_text(key: str) -> Text:
    """A key rendered verbatim and quoted, so spaces and brackets survive."""
    return Text(repr(key), style="b95.key")
