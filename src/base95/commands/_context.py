"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and telemetry, builds services,
and centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from base95.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from base95.config.settings import Base95Settings
    from base95.services.keys import KeyService
    from base95.services.result import ServiceResult
    from base95.services.sequence import SequenceService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: Base95Settings) -> None:
        self.settings = settings

        from base95.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        from base95.services.telemetry import set_telemetry

        set_telemetry(settings.verbose)

    @property
    def keys(self) -> KeyService:
        from base95.services.keys import KeyService

        return KeyService(self.settings)

    @property
    def sequences(self) -> SequenceService:
        from base95.services.sequence import SequenceService

        return SequenceService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped keys.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
