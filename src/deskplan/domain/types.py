"""Classification enums for people and teams.

Both orderings are load-bearing: the layout sorts on them directly,
so members must never be reordered for readability.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Any


class DogStatus(StrEnum):
    """How a person relates to dogs in the office."""

    AVOID = "AVOID"
    LIKE = "LIKE"
    HAVE = "HAVE"


# Avoid < Like < Have
DOG_STATUS_ORDER: dict[DogStatus, int] = {
    DogStatus.AVOID: 1,
    DogStatus.LIKE: 2,
    DogStatus.HAVE: 3,
}


class TeamCategory(IntEnum):
    """Dog tolerance makeup of a team; lower values are seated first."""

    DOG_HATERS = 0  # no HAVE, only AVOID and LIKE
    MIXED = 1  # at least one AVOID and one HAVE
    NO_TEAM = 2
    DOG_LOVERS = 3  # no AVOID, only LIKE and HAVE

    @property
    def label(self) -> str:
        return self.name.lower()


class TeamlessPlacement(StrEnum):
    """Where people without a team end up in the layout."""

    LAST = "last"
    CATEGORY = "category"


def coerce_dog_status(value: Any) -> Any:
    """Accept dog statuses case-insensitively (``"avoid"`` -> ``"AVOID"``)."""
    if isinstance(value, str) and not isinstance(value, DogStatus):
        return value.strip().upper()
    return value
