"""Output mode dispatch for ServiceResult.

``--json`` serializes the result as-is, ``--quiet`` prints the bare
minimum, and everything else goes through the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from deskplan.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from deskplan.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from the CLI and ``[output]`` config."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    show_category: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult according to *settings* (defaults: human output)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        show_category=settings.show_category or settings.verbose,
    )
