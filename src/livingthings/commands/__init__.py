"""Subcommand modules for livingthings.

Provides register_commands() which uses deferred imports to keep
``livingthings --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from livingthings.commands.ids import id_group

    cli.add_command(id_group)

    # --- Standalone commands ---
    from livingthings.commands.decode import decode, operations

    cli.add_command(decode)
    cli.add_command(operations)
