"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from deskplan.output.console import create_console, get_output, style_for_dog_status

if TYPE_CHECKING:
    from rich.console import Console

    from deskplan.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_category: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, show_category=show_category)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Layouts print one person id per desk, team summaries one team id per
    line (``-`` for the teamless run).
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if result.op == "desk_layout" and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items)
    if result.op == "team_summary" and isinstance(items, list):
        return "\n".join(item["team_id"] or "-" for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="desk.ok")
    op = Text(f"  {result.op}", style="desk.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="desk.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(Text(f"    {key}: {value}"))


def _team_label(item: dict[str, Any]) -> Text:
    if item.get("team_id") is None:
        return Text("(no team)", style="dim")
    return Text(item.get("team_name") or item["team_id"], style="desk.team")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="desk.error"),
        Text(f"  {result.op}", style="desk.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            if isinstance(value, list):
                for entry in value:
                    console.print(Text(f"    {key}: {entry}"))
            else:
                console.print(Text(f"    {key}: {value}"))


# ── Layout renderers ──────────────────────────────────────────────────


def _render_desk_layout(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_category: bool = False,
) -> None:
    """Render the seating plan as one table row per desk."""
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print("  (no people)")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Desk", style="desk.seat", justify="right")
    table.add_column("Name")
    table.add_column("Team")
    table.add_column("Dog status")
    if show_category:
        table.add_column("Category", style="dim")

    for item in items:
        status = str(item.get("dog_status", ""))
        row: list[Text | str] = [
            str(item["desk"]),
            Text(item.get("name") or str(item["id"])),
            _team_label(item),
            Text(status.lower(), style=style_for_dog_status(status)),
        ]
        if show_category:
            row.append(str(item.get("category", "")))
        table.add_row(*row)

    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_team_summary(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_category: bool = False,
) -> None:
    """Render team classifications in seating order."""
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])
    if not items:
        console.print("  (no teams)")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Team")
    table.add_column("Category")
    table.add_column("Size", justify="right")
    table.add_column("Avoid", justify="right", style="desk.dog.avoid")
    table.add_column("Like", justify="right", style="desk.dog.like")
    table.add_column("Have", justify="right", style="desk.dog.have")

    for item in items:
        table.add_row(
            _team_label(item),
            str(item["category"]),
            str(item["size"]),
            str(item["avoid"]),
            str(item["like"]),
            str(item["have"]),
        )

    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_category: bool = False,
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "desk_layout": _render_desk_layout,
    "team_summary": _render_team_summary,
}
