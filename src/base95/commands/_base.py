"""Click command class with an ``--examples`` flag.

Commands keep ``--help`` short and put worked invocations behind
``--examples``, which prints them and exits.
"""

from __future__ import annotations

from typing import Any

import click


class Base95Command(click.Command):
    """Click Command that accepts ``examples=`` text."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples(examples),
                    help="Show usage examples.",
                )
            )


def _show_examples(examples: str) -> Any:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(examples)
            ctx.exit(0)

    return callback
