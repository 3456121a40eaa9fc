"""Subcommand modules for deskplan.

Provides register_commands() which uses deferred imports to keep
``deskplan --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from deskplan.commands.layout import layout, teams

    cli.add_command(layout)
    cli.add_command(teams)
