"""Commands: key chains, the alphabet, and random insertion runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from base95.commands._base import Base95Command

if TYPE_CHECKING:
    from base95.commands._context import AppContext


@click.command(
    cls=Base95Command,
    examples="""\
  base95 chain
  base95 chain --toward one --steps 10
  base95 -q chain --steps 5""",
)
@click.option(
    "--toward",
    type=click.Choice(["zero", "one"]),
    default=None,
    help="Bound to average toward (default from config: zero).",
)
@click.option("--steps", type=int, default=None, help="Number of keys to produce.")
@click.pass_obj
def chain(app: AppContext, toward: str | None, steps: int | None) -> None:
    """Repeatedly prepend (toward zero) or append (toward one) a key."""
    app.emit(app.sequences.chain(toward, steps))  # type: ignore[arg-type]


@click.command(
    cls=Base95Command,
    examples="""\
  base95 alphabet
  base95 --json alphabet""",
)
@click.pass_obj
def alphabet(app: AppContext) -> None:
    """List the 95 key characters with their digit values."""
    app.emit(app.sequences.alphabet())


@click.command(
    cls=Base95Command,
    examples="""\
  base95 simulate
  base95 simulate --inserts 10000 --seed 7
  base95 -v simulate --inserts 20""",
)
@click.option("--inserts", type=int, default=None, help="Number of random insertions.")
@click.option("--seed", type=int, default=None, help="Random seed for insert positions.")
@click.pass_obj
def simulate(app: AppContext, inserts: int | None, seed: int | None) -> None:
    """Insert keys at random list positions and report key lengths."""
    app.emit(app.sequences.simulate(inserts, seed))
