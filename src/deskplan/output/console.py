"""Rich Console factory and theme for deskplan output.

Consoles render into a StringIO buffer so renderers can return plain
strings.  Rich drops color codes on its own when not on a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DESK_THEME = Theme(
    {
        "desk.ok": "bold green",
        "desk.error": "bold red",
        "desk.op": "bold cyan",
        "desk.key": "dim",
        "desk.seat": "bold blue",
        "desk.team": "bold",
        "desk.dog.avoid": "red",
        "desk.dog.like": "yellow",
        "desk.dog.have": "green",
    }
)

_DOG_STYLES: dict[str, str] = {
    "AVOID": "desk.dog.avoid",
    "LIKE": "desk.dog.like",
    "HAVE": "desk.dog.have",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=DESK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_dog_status(dog_status: str) -> str:
    """Return the Rich style name for a dog status value."""
    return _DOG_STYLES.get(dog_status.upper(), "")
