"""Tests for the Rich Console factory and theme."""

from io import StringIO

from deskplan.output.console import DESK_THEME, create_console, get_output, style_for_dog_status


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[desk.dog.have]HAVE[/desk.dog.have]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "HAVE" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80


class TestTheme:
    def test_dog_styles_defined(self) -> None:
        for name in ("desk.dog.avoid", "desk.dog.like", "desk.dog.have"):
            assert name in DESK_THEME.styles

    def test_style_for_dog_status(self) -> None:
        assert style_for_dog_status("AVOID") == "desk.dog.avoid"
        assert style_for_dog_status("have") == "desk.dog.have"
        assert style_for_dog_status("CAT") == ""
