"""Tests for Rich Console factory and theme."""

from io import StringIO

from base95.output.console import BASE95_THEME, create_console, get_output, key_text


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_widths(self) -> None:
        assert create_console().width == 120
        assert create_console(width=80).width == 80

    def test_theme_styles(self) -> None:
        assert "b95.key" in BASE95_THEME.styles
        assert "b95.error" in BASE95_THEME.styles


class TestKeyText:
    def test_markup_characters_survive(self) -> None:
        console = create_console()
        console.print(key_text("[b]"))
        assert get_output(console).strip() == "'[b]'"

    def test_spaces_are_visible(self) -> None:
        assert key_text("a  ").plain == "'a  '"
