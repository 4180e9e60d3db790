"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides centralized result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from livingthings.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from livingthings.config.settings import LivingThingsSettings
    from livingthings.validation.result import DecodeResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LivingThingsSettings) -> None:
        self.settings = settings

        from livingthings.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: DecodeResult) -> None:
        """Format and output a DecodeResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            show_debug=self.settings.errors.expose_debug,
        )
        output = format_result(result, settings=output_settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
