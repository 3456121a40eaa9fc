"""Tests for the layout and teams CLI commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from deskplan.cli import cli

ROSTER: dict[str, Any] = {
    "teams": [{"id": "t1", "name": "Platform"}],
    "people": [
        {"id": "alice", "name": "Alice", "team": "t1", "dogStatus": "LIKE"},
        {"id": "bob", "name": "Bob", "team": "t1", "dogStatus": "LIKE"},
        {"id": "charlie", "name": "Charlie", "team": "t1", "dogStatus": "AVOID"},
        {"id": "david", "name": "David", "team": "t1", "dogStatus": "HAVE"},
        {"id": "eve", "name": "Eve", "team": "t1", "dogStatus": "HAVE"},
        {"id": "grace", "name": "Grace", "dogStatus": "AVOID"},
    ],
}


@pytest.fixture
def roster(write_roster: Callable[[Any], Path]) -> str:
    return str(write_roster(ROSTER))


@pytest.mark.usefixtures("_isolated_cwd")
class TestLayoutCommand:
    def test_human_output(self, cli_runner: CliRunner, roster: str) -> None:
        result = cli_runner.invoke(cli, ["layout", roster])
        assert result.exit_code == 0, result.output
        assert "OK" in result.output
        assert "Charlie" in result.output
        assert "Platform" in result.output

    def test_json_output(self, cli_runner: CliRunner, roster: str) -> None:
        result = cli_runner.invoke(cli, ["--json", "layout", roster])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "desk_layout"
        assert [i["id"] for i in data["data"]["items"]] == [
            "charlie",
            "alice",
            "david",
            "bob",
            "eve",
            "grace",
        ]

    def test_quiet_output(self, cli_runner: CliRunner, roster: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "layout", roster])
        assert result.exit_code == 0
        assert result.output.split() == ["charlie", "alice", "david", "bob", "eve", "grace"]

    def test_teamless_placement_flag(self, cli_runner: CliRunner, roster: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "layout", roster, "--teamless-placement", "category"])
        assert result.exit_code == 0
        # Grace's run is all avoiders, so it sits before the mixed team.
        assert result.output.split()[0] == "grace"

    def test_teamless_placement_from_config(
        self, cli_runner: CliRunner, roster: str, tmp_path: Path
    ) -> None:
        (tmp_path / "deskplan.toml").write_text('[layout]\nteamless_placement = "category"\n')
        result = cli_runner.invoke(cli, ["-q", "layout", roster])
        assert result.exit_code == 0
        assert result.output.split()[0] == "grace"

    def test_flag_overrides_config(
        self, cli_runner: CliRunner, roster: str, tmp_path: Path
    ) -> None:
        (tmp_path / "deskplan.toml").write_text('[layout]\nteamless_placement = "category"\n')
        result = cli_runner.invoke(cli, ["-q", "layout", roster, "--teamless-placement", "last"])
        assert result.output.split()[-1] == "grace"

    def test_category_column_from_config(
        self, cli_runner: CliRunner, roster: str, tmp_path: Path
    ) -> None:
        (tmp_path / "deskplan.toml").write_text("[output]\nshow_team_category = true\n")
        result = cli_runner.invoke(cli, ["layout", roster])
        assert result.exit_code == 0
        assert "Category" in result.output
        assert "mixed" in result.output

    def test_invalid_placement_choice(self, cli_runner: CliRunner, roster: str) -> None:
        result = cli_runner.invoke(cli, ["layout", roster, "--teamless-placement", "first"])
        assert result.exit_code == 2

    def test_missing_roster(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["layout", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "Roster not found" in result.output

    def test_invalid_roster(
        self, cli_runner: CliRunner, write_roster: Callable[[Any], Path]
    ) -> None:
        path = write_roster([{"id": "p1", "dogStatus": "CAT"}])
        result = cli_runner.invoke(cli, ["-v", "layout", str(path)])
        assert result.exit_code == 1
        assert "people.0.dogStatus" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["layout", "--examples"])
        assert result.exit_code == 0
        assert "deskplan layout roster.json" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestTeamsCommand:
    def test_human_output(self, cli_runner: CliRunner, roster: str) -> None:
        result = cli_runner.invoke(cli, ["teams", roster])
        assert result.exit_code == 0, result.output
        assert "Platform" in result.output
        assert "mixed" in result.output
        assert "(no team)" in result.output

    def test_json_output(self, cli_runner: CliRunner, roster: str) -> None:
        result = cli_runner.invoke(cli, ["--json", "teams", roster])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "team_summary"
        assert [i["team_id"] for i in data["data"]["items"]] == ["t1", None]

    def test_quiet_output(self, cli_runner: CliRunner, roster: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "teams", roster, "--teamless-placement", "category"])
        assert result.output.split() == ["-", "t1"]
