"""Rich Console factory and theme for publish-easier output.

Consoles render to a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PUBLISH_THEME = Theme(
    {
        "pub.ok": "bold green",
        "pub.error": "bold red",
        "pub.warning": "bold yellow",
        "pub.op": "bold cyan",
        "pub.key": "dim",
        "pub.path": "dim",
        "pub.version": "bold magenta",
        "pub.skipped": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=PUBLISH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
