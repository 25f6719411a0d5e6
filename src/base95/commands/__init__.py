"""Subcommand modules for base95.

Provides register_commands() which uses deferred imports to keep
``base95 --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    # --- Single keys ---
    from base95.commands.keys import avg, between, digits, mid, parse

    cli.add_command(mid)
    cli.add_command(avg)
    cli.add_command(between)
    cli.add_command(digits)
    cli.add_command(parse)

    # --- Sequences ---
    from base95.commands.sequence import alphabet, chain, simulate

    cli.add_command(chain)
    cli.add_command(alphabet)
    cli.add_command(simulate)
