"""Shared pytest fixtures and test helpers for deskplan tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from deskplan.domain.people import Person, Team
from deskplan.domain.types import DogStatus


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray deskplan.toml is found."""
    monkeypatch.delenv("DESKPLAN_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_roster(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a roster payload as JSON and return its path."""

    def _write(payload: Any, name: str = "roster.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def person(
    name: str,
    status: str | DogStatus,
    team: str | None = None,
    *,
    team_name: str = "",
) -> Person:
    """Build a Person whose id is its name."""
    return Person(
        id=name,
        name=name,
        team=Team(id=team, name=team_name or team) if team is not None else None,
        dog_status=DogStatus(status) if not isinstance(status, DogStatus) else status,
    )


def names(people: Sequence[Person]) -> list[str]:
    """Person names in order."""
    return [p.name for p in people]


# Single team from the README example, in input order.
EXAMPLE_TEAM = [
    ("Alice", "LIKE"),
    ("Bob", "LIKE"),
    ("Charlie", "AVOID"),
    ("David", "HAVE"),
    ("Eve", "HAVE"),
]


@pytest.fixture(autouse=True)
def _restore_logging() -> Any:
    """Undo handler and level changes made by configure_logging()."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("deskplan")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
