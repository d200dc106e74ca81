"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from publish_easier.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from publish_easier.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "publish" and result.data.get("version"):
        return f"OK: {result.op} {result.data['version']}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "pub.ok"), (f"  {result.op}", "pub.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pub.key")
    if key.endswith("path") or key.endswith("_dir") or key == "root":
        v = Text(str(value), style="pub.path")
    elif key.endswith("version"):
        v = Text(str(value), style="pub.version")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "pub.error"), (f"  {result.op}", "pub.op"), f": {msg}")
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_publish(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "publish_dir", data.get("publish_dir", ""))

    previous = data.get("previous_version")
    version = data.get("version")
    if previous != version:
        _field(console, "version", f"{previous} -> {version}")
    else:
        _field(console, "version", version)

    copied = data.get("copied", [])
    skipped = data.get("skipped", [])
    if copied or skipped:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Item")
        table.add_column("Status")
        for item in copied:
            table.add_row(str(item), Text("copied", style="pub.ok"))
        for item in skipped:
            table.add_row(str(item), Text("skipped", style="pub.skipped"))
        console.print(table)

    _field(console, "source_manifest_updated", data.get("source_manifest_updated", False))
    _field(console, "published", data.get("published", False))
    if verbose and data.get("artifacts_removed"):
        _field(console, "artifacts_removed", ", ".join(data["artifacts_removed"]))


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "path", result.data.get("path", ""))
    if result.data.get("next_step"):
        console.print(f"  {result.data['next_step']}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "publish": _render_publish,
    "init_config": _render_init,
    "clean": _render_generic,
}
