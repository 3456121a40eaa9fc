"""Desk layout algorithm.

Desks form a single line.  The layout is built in four passes over the
roster, each producing a new list:

1. Group people by team, ordering each team Avoid -> Like -> Have.
2. Classify every contiguous team run by its dog tolerance makeup.
3. Re-sort teams by category so dog haters sit at one end and dog
   lovers at the other, with mixed teams in between.
4. Inside each team's run of non-avoiders, alternate likers and owners.

Example, a single team of five:

    Alice (Like), Bob (Like), Charlie (Avoid), David (Have), Eve (Have)

becomes

    Charlie (Avoid), Alice (Like), David (Have), Bob (Like), Eve (Have)

INVARIANT: the result is a permutation of the input.  Person objects
are never copied or modified, only reordered.
"""

from __future__ import annotations

import functools
import sys
from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from deskplan.domain.arrays import reorder_subarray
from deskplan.domain.people import Person
from deskplan.domain.types import (
    DOG_STATUS_ORDER,
    DogStatus,
    TeamCategory,
    TeamlessPlacement,
)

# Rank given to anyone whose team has no category (sorts after DOG_LOVERS).
MAX_PRIORITY = sys.maxsize

# Non-avoider runs this short are left as they are.
SHORT_RUN_THRESHOLD = 3


@dataclass(frozen=True)
class LayoutOptions:
    """Tunable knobs; the defaults reproduce the reference layout."""

    teamless_placement: TeamlessPlacement = TeamlessPlacement.LAST
    short_run_threshold: int = SHORT_RUN_THRESHOLD


DEFAULT_OPTIONS = LayoutOptions()


@dataclass(frozen=True)
class TeamRun:
    """A contiguous block of people sharing a team id (``end`` inclusive)."""

    team_id: str | None
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class TeamSummary:
    """Classification of one team run."""

    team_id: str | None
    category: TeamCategory
    avoid: int = 0
    like: int = 0
    have: int = 0

    @property
    def size(self) -> int:
        return self.avoid + self.like + self.have


# --- Pass 1: grouping ---


def grouping_key(person: Person) -> tuple[bool, str, int]:
    """Sort key grouping people by team, then by dog status rank.

    Everyone without a team lands in one block, ordered by dog status
    alone.  The block sits after the teams here; pass 3 decides where it
    finally goes.
    """
    team_id = person.team_id
    return (team_id is None, team_id or "", DOG_STATUS_ORDER[person.dog_status])


def group_people(people: Sequence[Person]) -> list[Person]:
    """Stable sort of *people* by :func:`grouping_key`."""
    return sorted(people, key=grouping_key)


# --- Pass 2: classification ---


def split_team_runs(people: Sequence[Person]) -> list[TeamRun]:
    """Fold *people* into contiguous runs, closing one on every team change."""
    runs: list[TeamRun] = []
    if not people:
        return runs

    current = people[0].team_id
    start = 0
    for index, person in enumerate(people):
        if person.team_id != current:
            runs.append(TeamRun(team_id=current, start=start, end=index - 1))
            current = person.team_id
            start = index
    runs.append(TeamRun(team_id=current, start=start, end=len(people) - 1))
    return runs


def categorise_team(counts: Mapping[DogStatus, int]) -> TeamCategory:
    """Derive a team's category from its dog status counts."""
    avoid = counts.get(DogStatus.AVOID, 0)
    have = counts.get(DogStatus.HAVE, 0)

    if avoid == 0:
        return TeamCategory.DOG_LOVERS
    if have == 0:
        return TeamCategory.DOG_HATERS
    if avoid > 0 and have > 0:
        return TeamCategory.MIXED
    return TeamCategory.NO_TEAM


def classify_teams(people: Sequence[Person]) -> list[TeamSummary]:
    """Summarise every team run of a grouped sequence, in run order."""
    summaries: list[TeamSummary] = []
    for run in split_team_runs(people):
        counts = Counter(p.dog_status for p in people[run.start : run.end + 1])
        summaries.append(
            TeamSummary(
                team_id=run.team_id,
                category=categorise_team(counts),
                avoid=counts[DogStatus.AVOID],
                like=counts[DogStatus.LIKE],
                have=counts[DogStatus.HAVE],
            )
        )
    return summaries


# --- Pass 3: ranking ---


def build_rank_map(summaries: Sequence[TeamSummary]) -> dict[str | None, int]:
    """Map team id to category ordinal; the teamless run is keyed by None."""
    return {summary.team_id: int(summary.category) for summary in summaries}


def team_rank(
    team_id: str | None,
    rank_map: Mapping[str | None, int],
    placement: TeamlessPlacement = TeamlessPlacement.LAST,
) -> int:
    """Look up the category ordinal used to place *team_id*.

    With ``LAST`` placement the teamless run is never found, whatever its
    category, so people without a team are always seated at the far end.
    Unknown teams also get :data:`MAX_PRIORITY`.
    """
    if team_id is None and placement is TeamlessPlacement.LAST:
        return MAX_PRIORITY
    return rank_map.get(team_id, MAX_PRIORITY)


def ranking_key(
    rank_map: Mapping[str | None, int],
    placement: TeamlessPlacement = TeamlessPlacement.LAST,
) -> Callable[[Person], tuple[int, bool, str]]:
    """Build the pass 3 sort key: category rank, then team id."""

    def key(person: Person) -> tuple[int, bool, str]:
        team_id = person.team_id
        return (team_rank(team_id, rank_map, placement), team_id is None, team_id or "")

    return key


def rank_by_category(
    people: Sequence[Person],
    summaries: Sequence[TeamSummary],
    placement: TeamlessPlacement = TeamlessPlacement.LAST,
) -> list[Person]:
    """Stable re-sort of grouped *people* by their team's category."""
    rank_map = build_rank_map(summaries)
    return sorted(people, key=ranking_key(rank_map, placement))


def order_summaries(
    summaries: Sequence[TeamSummary],
    placement: TeamlessPlacement = TeamlessPlacement.LAST,
) -> list[TeamSummary]:
    """Return *summaries* in the order their teams are seated."""
    rank_map = build_rank_map(summaries)
    return sorted(
        summaries,
        key=lambda s: (
            team_rank(s.team_id, rank_map, placement),
            s.team_id is None,
            s.team_id or "",
        ),
    )


# --- Pass 4: interleaving ---


class ScanState(Enum):
    SEARCHING = "searching"
    IN_RUN = "in_run"


def find_interleave_runs(people: Sequence[Person]) -> list[tuple[int, int]]:
    """Locate each team's block of non-avoiders as ``(start, end)`` pairs.

    A run opens at the first non-Avoid person and closes just before the
    team changes or an Avoid person shows up.  The person that closed a
    run may open the next one.
    """
    runs: list[tuple[int, int]] = []
    state = ScanState.SEARCHING
    run_team: str | None = None
    run_start = 0

    for index, person in enumerate(people):
        if state is ScanState.IN_RUN and (
            person.team_id != run_team or person.dog_status is DogStatus.AVOID
        ):
            runs.append((run_start, index - 1))
            state = ScanState.SEARCHING

        if state is ScanState.SEARCHING and person.dog_status is not DogStatus.AVOID:
            run_team = person.team_id
            run_start = index
            state = ScanState.IN_RUN

    if state is ScanState.IN_RUN:
        runs.append((run_start, len(people) - 1))
    return runs


def interleave_by_dog_status(
    run: Sequence[Person],
    short_run_threshold: int = SHORT_RUN_THRESHOLD,
) -> list[Person]:
    """Alternate the leading dog-status block with the rest of *run*.

    Leftovers of the larger group trail at the end in their original
    order.  Short or single-status runs come back unchanged.
    """
    if len(run) <= short_run_threshold:
        return list(run)

    first = run[0].dog_status
    split = next(
        (i for i in range(1, len(run)) if run[i].dog_status != first),
        None,
    )
    if split is None:
        return list(run)

    group_a = run[:split]
    group_b = run[split:]

    result: list[Person] = []
    for a, b in zip(group_a, group_b, strict=False):
        result.append(a)
        result.append(b)

    paired = min(len(group_a), len(group_b))
    result.extend(group_a[paired:])
    result.extend(group_b[paired:])
    return result


def interleave_people(
    people: Sequence[Person],
    short_run_threshold: int = SHORT_RUN_THRESHOLD,
) -> list[Person]:
    """Apply :func:`interleave_by_dog_status` to every non-avoider run."""
    transform = functools.partial(
        interleave_by_dog_status, short_run_threshold=short_run_threshold
    )
    result = list(people)
    for start, end in find_interleave_runs(people):
        result = reorder_subarray(result, start, end, transform)
    return result


# --- Entry point ---


@dataclass(frozen=True)
class LayoutPlan:
    """Output of every pass, kept for reporting."""

    grouped: list[Person]
    summaries: list[TeamSummary]
    ranked: list[Person]
    layout: list[Person]


def plan_desk_layout(
    people: Sequence[Person],
    options: LayoutOptions | None = None,
) -> LayoutPlan:
    """Run all four passes over *people* and keep each intermediate list."""
    opts = options or DEFAULT_OPTIONS

    grouped = group_people(people)
    summaries = classify_teams(grouped)
    ranked = rank_by_category(grouped, summaries, opts.teamless_placement)
    layout = interleave_people(ranked, opts.short_run_threshold)
    return LayoutPlan(grouped=grouped, summaries=summaries, ranked=ranked, layout=layout)


def calculate_desk_layout(
    people: Sequence[Person],
    options: LayoutOptions | None = None,
) -> list[Person]:
    """Order *people* into a desk layout.

    Teammates sit together, avoiders sit as far from dog owners as the
    team boundaries allow, and likers and owners alternate within a team.
    """
    return plan_desk_layout(people, options).layout
