"""Person and Team models as supplied by the roster."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from deskplan.domain.types import DogStatus, coerce_dog_status


class Team(BaseModel):
    """A team; the layout only ever looks at its id."""

    model_config = {"frozen": True}

    id: str
    name: str = ""


class Person(BaseModel):
    """Someone who needs a desk.

    ``dog_status`` is read from ``dogStatus`` on the wire but may be
    passed by field name as well.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    name: str = ""
    team: Team | None = None
    dog_status: DogStatus = Field(alias="dogStatus")

    @field_validator("dog_status", mode="before")
    @classmethod
    def _normalize_dog_status(cls, value: Any) -> Any:
        return coerce_dog_status(value)

    @property
    def team_id(self) -> str | None:
        """The team id, or None when the person has no team."""
        return self.team.id if self.team is not None else None
