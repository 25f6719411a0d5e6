"""Commands: generate, average, and inspect single keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from base95.commands._base import Base95Command

if TYPE_CHECKING:
    from base95.commands._context import AppContext


@click.command(
    cls=Base95Command,
    examples="""\
  base95 mid
  base95 --json mid""",
)
@click.pass_obj
def mid(app: AppContext) -> None:
    """Print the midpoint key, the first key of an empty list."""
    app.emit(app.keys.mid())


@click.command(
    cls=Base95Command,
    examples="""\
  base95 avg O 7
  base95 -q avg 'a b' 'a c'""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def avg(app: AppContext, left: str, right: str) -> None:
    """Print the shortest key strictly between LEFT and RIGHT."""
    app.emit(app.keys.avg(left, right))


@click.command(
    cls=Base95Command,
    examples="""\
  base95 between
  base95 between --before O
  base95 between --after O
  base95 between --after 7 --before O""",
)
@click.option("--after", "left", default=None, help="Key the new key must sort after.")
@click.option("--before", "right", default=None, help="Key the new key must sort before.")
@click.pass_obj
def between(app: AppContext, left: str | None, right: str | None) -> None:
    """Print a key for inserting between two list neighbours.

    Omit --after to insert at the start of the list, --before to insert at
    the end, or both for the first key of an empty list.
    """
    app.emit(app.keys.between(left, right))


@click.command(
    cls=Base95Command,
    examples="""\
  base95 digits 'j>Z= 4'
  base95 --json digits O""",
)
@click.argument("key")
@click.pass_obj
def digits(app: AppContext, key: str) -> None:
    """Show the raw base-95 digits of KEY."""
    app.emit(app.keys.digits(key))


@click.command(
    cls=Base95Command,
    examples="""\
  base95 parse 'hello'
  base95 --json parse ''""",
)
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Check whether TEXT is a valid key."""
    app.emit(app.keys.parse(text))
