"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, deskplan.toml only contains
overrides.  An empty (or missing) file reproduces the reference layout.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from deskplan.domain.types import TeamlessPlacement

# --- deskplan.toml sections ---


class LayoutConfig(BaseModel):
    """[layout] section."""

    model_config = {"frozen": True}

    teamless_placement: TeamlessPlacement = TeamlessPlacement.LAST
    short_run_threshold: int = Field(default=3, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    show_team_category: bool = False

