"""LayoutService — desk layout and team classification for a roster.

Wraps the pure algorithm in :mod:`deskplan.domain.layout` with roster
loading and the ServiceResult contract.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from deskplan.domain.layout import (
    DEFAULT_OPTIONS,
    LayoutOptions,
    LayoutPlan,
    TeamSummary,
    find_interleave_runs,
    order_summaries,
    plan_desk_layout,
)
from deskplan.domain.types import TeamCategory, TeamlessPlacement
from deskplan.services.roster import RosterError, load_roster
from deskplan.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from deskplan.config.models import LayoutConfig
    from deskplan.domain.people import Person

log = structlog.get_logger(__name__)


class LayoutService:
    """Computes desk layouts and team summaries from roster files."""

    def __init__(self, options: LayoutOptions | None = None) -> None:
        self._options = options or DEFAULT_OPTIONS

    @classmethod
    def from_config(
        cls,
        config: LayoutConfig,
        *,
        teamless_placement: TeamlessPlacement | str | None = None,
    ) -> LayoutService:
        """Build a service from the ``[layout]`` config, with an optional override."""
        options = LayoutOptions(
            teamless_placement=TeamlessPlacement(config.teamless_placement),
            short_run_threshold=config.short_run_threshold,
        )
        if teamless_placement is not None:
            options = replace(options, teamless_placement=TeamlessPlacement(teamless_placement))
        return cls(options)

    @property
    def options(self) -> LayoutOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def desk_layout(self, roster_path: Path) -> ServiceResult:
        """Load *roster_path* and seat everyone in it."""
        op = "desk_layout"
        try:
            people = load_roster(roster_path)
        except RosterError as exc:
            return _roster_failure(op, exc)
        return self.layout_people(people)

    def layout_people(self, people: Sequence[Person]) -> ServiceResult:
        """Seat an already-loaded list of people."""
        plan = self._plan(people)
        categories = {s.team_id: self._placed_category(s) for s in plan.summaries}

        items: list[dict[str, Any]] = []
        for desk, person in enumerate(plan.layout, start=1):
            items.append(
                {
                    "desk": desk,
                    "id": person.id,
                    "name": person.name,
                    "team_id": person.team_id,
                    "team_name": person.team.name if person.team is not None else None,
                    "dog_status": str(person.dog_status),
                    "category": categories[person.team_id].label,
                }
            )

        return ServiceResult(
            ok=True,
            op="desk_layout",
            data={"count": len(items), "items": items},
            meta=self._meta(),
        )

    def team_summary(self, roster_path: Path) -> ServiceResult:
        """Load *roster_path* and classify each team, in seating order."""
        op = "team_summary"
        try:
            people = load_roster(roster_path)
        except RosterError as exc:
            return _roster_failure(op, exc)
        return self.summarize_people(people)

    def summarize_people(self, people: Sequence[Person]) -> ServiceResult:
        """Classify the teams of an already-loaded list of people."""
        names = {p.team_id: p.team.name for p in people if p.team is not None}
        plan = self._plan(people)
        summaries = order_summaries(plan.summaries, self._options.teamless_placement)

        items = [
            {
                "team_id": s.team_id,
                "team_name": names.get(s.team_id),
                "category": self._placed_category(s).label,
                "size": s.size,
                "avoid": s.avoid,
                "like": s.like,
                "have": s.have,
            }
            for s in summaries
        ]

        return ServiceResult(
            ok=True,
            op="team_summary",
            data={"count": len(items), "items": items},
            meta=self._meta(),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _plan(self, people: Sequence[Person]) -> LayoutPlan:
        """Run the layout passes and log one debug event per stage."""
        plan = plan_desk_layout(people, self._options)

        log.debug(
            "layout.grouped",
            people=len(plan.grouped),
            teams=len({p.team_id for p in plan.grouped if p.team_id is not None}),
            teamless=sum(1 for p in plan.grouped if p.team_id is None),
        )
        log.debug(
            "layout.classified",
            team_runs=len(plan.summaries),
            **{c.label: sum(1 for s in plan.summaries if s.category is c) for c in TeamCategory},
        )
        ordered = order_summaries(plan.summaries, self._options.teamless_placement)
        log.debug(
            "layout.ranked",
            team_order=[s.team_id for s in ordered],
            teamless_placement=str(self._options.teamless_placement),
        )
        threshold = self._options.short_run_threshold
        interleaved = [r for r in find_interleave_runs(plan.ranked) if r[1] - r[0] + 1 > threshold]
        log.debug(
            "layout.interleaved",
            runs=len(interleaved),
            people=len(plan.layout),
        )
        return plan

    def _placed_category(self, summary: TeamSummary) -> TeamCategory:
        """Category that decides where *summary*'s team sits."""
        if summary.team_id is None and self._options.teamless_placement is TeamlessPlacement.LAST:
            return TeamCategory.NO_TEAM
        return summary.category

    def _meta(self) -> dict[str, Any]:
        return {
            "teamless_placement": str(self._options.teamless_placement),
            "short_run_threshold": self._options.short_run_threshold,
        }


def _roster_failure(op: str, exc: RosterError) -> ServiceResult:
    log.debug("roster.failed", code=exc.code, message=exc.message)
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
    )
