"""Commands: seat a roster and classify its teams."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from deskplan.commands._base import DeskCommand
from deskplan.config.logging import bind_command
from deskplan.domain.types import TeamlessPlacement

if TYPE_CHECKING:
    from deskplan.commands._context import AppContext
    from deskplan.services.layout import LayoutService

_roster_argument = click.argument(
    "roster",
    type=click.Path(dir_okay=False, path_type=Path),
)

_placement_option = click.option(
    "--teamless-placement",
    type=click.Choice([p.value for p in TeamlessPlacement]),
    default=None,
    help="Where people without a team sit (overrides [layout] config).",
)


def _service(app: AppContext, teamless_placement: str | None) -> LayoutService:
    from deskplan.services.layout import LayoutService

    return LayoutService.from_config(
        app.settings.layout,
        teamless_placement=teamless_placement,
    )


@click.command(
    cls=DeskCommand,
    examples="""\
  deskplan layout roster.json
  deskplan layout roster.json --teamless-placement category
  deskplan --json layout roster.json
  deskplan -q layout roster.json""",
)
@_roster_argument
@_placement_option
@click.pass_obj
def layout(app: AppContext, roster: Path, teamless_placement: str | None) -> None:
    """Compute the desk layout for ROSTER (a JSON file of people)."""
    bind_command("layout")
    app.emit(_service(app, teamless_placement).desk_layout(roster))


@click.command(
    cls=DeskCommand,
    examples="""\
  deskplan teams roster.json
  deskplan --json teams roster.json""",
)
@_roster_argument
@_placement_option
@click.pass_obj
def teams(app: AppContext, roster: Path, teamless_placement: str | None) -> None:
    """Show each team's dog tolerance category in seating order."""
    bind_command("teams")
    app.emit(_service(app, teamless_placement).team_summary(roster))
