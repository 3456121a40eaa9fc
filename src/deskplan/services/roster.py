"""Roster loading — JSON files of people (and optionally teams).

Two shapes are accepted::

    [{"id": "p1", "name": "Alice", "team": {"id": "t1", "name": "Core"}, "dogStatus": "LIKE"}]

    {"teams": [{"id": "t1", "name": "Core"}],
     "people": [{"id": "p1", "name": "Alice", "team": "t1", "dogStatus": "LIKE"}]}

With the second shape a person may reference their team by id only;
the name is filled in from ``teams``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from deskplan.domain.people import Person, Team
from deskplan.domain.types import DogStatus, coerce_dog_status

ROSTER_NOT_FOUND = "ROSTER_NOT_FOUND"
INVALID_ROSTER = "INVALID_ROSTER"
DUPLICATE_PERSON = "DUPLICATE_PERSON"


class RosterError(Exception):
    """Raised when a roster cannot be read or validated."""

    def __init__(self, code: str, message: str, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail or {}


class PersonRecord(BaseModel):
    """A person as written in a roster file."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str
    name: str = ""
    team: Team | str | None = None
    dog_status: DogStatus = Field(alias="dogStatus")

    @field_validator("dog_status", mode="before")
    @classmethod
    def _normalize_dog_status(cls, value: Any) -> Any:
        return coerce_dog_status(value)


class RosterFile(BaseModel):
    """Top-level roster document."""

    model_config = {"frozen": True}

    teams: list[Team] = Field(default_factory=list)
    people: list[PersonRecord] = Field(default_factory=list)


def _resolve_team(ref: Team | str | None, teams: dict[str, Team]) -> Team | None:
    if ref is None:
        return None
    if isinstance(ref, str):
        return teams.get(ref, Team(id=ref))
    if not ref.name:
        return teams.get(ref.id, ref)
    return ref


def _validation_detail(exc: ValidationError) -> dict[str, Any]:
    return {
        "errors": [
            {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
            for err in exc.errors()
        ]
    }


def parse_roster(raw: Any) -> list[Person]:
    """Validate decoded roster JSON and return people in file order."""
    if isinstance(raw, list):
        raw = {"people": raw}
    if not isinstance(raw, dict):
        msg = f"Roster must be a list of people or an object, got {type(raw).__name__}"
        raise RosterError(INVALID_ROSTER, msg)

    try:
        roster = RosterFile.model_validate(raw)
    except ValidationError as exc:
        msg = f"Roster failed validation ({exc.error_count()} errors)"
        raise RosterError(INVALID_ROSTER, msg, _validation_detail(exc)) from exc

    teams = {team.id: team for team in roster.teams}
    people: list[Person] = []
    seen: set[str] = set()
    for record in roster.people:
        if record.id in seen:
            raise RosterError(
                DUPLICATE_PERSON,
                f"Person {record.id!r} appears more than once",
                {"id": record.id},
            )
        seen.add(record.id)
        people.append(
            Person(
                id=record.id,
                name=record.name,
                team=_resolve_team(record.team, teams),
                dog_status=record.dog_status,
            )
        )
    return people


def load_roster(path: Path) -> list[Person]:
    """Read and validate a roster file."""
    if not path.is_file():
        raise RosterError(ROSTER_NOT_FOUND, f"Roster not found: {path}", {"path": str(path)})

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise RosterError(
            INVALID_ROSTER,
            f"Roster is not UTF-8 text: {path}",
            {"path": str(path)},
        ) from exc
    except json.JSONDecodeError as exc:
        raise RosterError(
            INVALID_ROSTER,
            f"Invalid JSON in {path}: {exc}",
            {"path": str(path)},
        ) from exc
    return parse_roster(raw)
