"""Tests for the Rich console factory."""

from publish_easier.output.console import PUBLISH_THEME, create_console, get_output


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_theme_styles_resolve(self) -> None:
        console = create_console(no_color=True)
        console.print("[pub.ok]OK[/pub.ok] [pub.version]1.0.0[/pub.version]")
        assert get_output(console) == "OK 1.0.0\n"

    def test_width_override(self) -> None:
        assert create_console(width=60).width == 60

    def test_theme_has_status_styles(self) -> None:
        for name in ("pub.ok", "pub.error", "pub.warning"):
            assert name in PUBLISH_THEME.styles
