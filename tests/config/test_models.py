"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from deskplan.config.models import LayoutConfig, OutputConfig
from deskplan.domain.types import TeamlessPlacement


class TestDefaults:
    def test_layout_defaults(self) -> None:
        cfg = LayoutConfig()
        assert cfg.teamless_placement is TeamlessPlacement.LAST
        assert cfg.short_run_threshold == 3

    def test_output_defaults(self) -> None:
        assert OutputConfig().show_team_category is False


class TestValidation:
    def test_placement_from_string(self) -> None:
        assert LayoutConfig(teamless_placement="category").teamless_placement is (
            TeamlessPlacement.CATEGORY
        )

    def test_unknown_placement_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LayoutConfig(teamless_placement="first")

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LayoutConfig(short_run_threshold=-1)

    def test_frozen(self) -> None:
        cfg = LayoutConfig()
        with pytest.raises(ValidationError):
            cfg.short_run_threshold = 5  # type: ignore[misc]
