"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Drawing operations print the drawn lines verbatim, with no status line,
so their human output is exactly what the scene wrote. Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from scenectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from scenectl.services.result import ServiceResult

type _Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int = 120) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

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
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, text: str, style: str = "") -> None:
    console.print(Text(text, style=style), soft_wrap=True)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "scene.ok"), (f"  {result.op}", "scene.op")))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text.assemble((f"  {key}: ", "scene.key"), str(value)), soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_telemetry_tree(console, value, indent=4)
        else:
            _line(console, f"    {key}: {value}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    text = Text(prefix)
    text.append(f"{duration:>8.2f}ms", style=style)
    text.append(f"  {span_data.get('name', '?')}")
    console.print(text, soft_wrap=True)
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Drawing renderers ─────────────────────────────────────────────────


def _render_drawing(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print drawn lines; scene and composite headers are emphasised."""
    for line in result.data.get("lines", []):
        _line(console, line, "scene.header" if line.endswith(":") else "")
    if verbose:
        _render_meta(console, result)


def _render_clone(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _line(console, "Оригинал", "scene.op")
    for line in result.data.get("lines", []):
        _line(console, line, "scene.header" if line.endswith(":") else "")
    console.print()
    _line(console, "Клон", "scene.op")
    for line in result.data.get("clone_lines", []):
        _line(console, line, "scene.header" if line.endswith(":") else "")
    console.print()
    identical = result.data.get("identical", False)
    _line(
        console,
        "identical output" if identical else "output differs",
        "scene.ok" if identical else "scene.warning",
    )
    if verbose:
        _field(console, "shared_objects", result.data.get("shared_objects", 0))
        _render_meta(console, result)


def _render_xml(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for line in result.data.get("lines", []):
        _line(console, line, "scene.xml")
    if verbose:
        _render_meta(console, result)


def _render_widgets(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for row in result.data.get("layout", []):
        _line(console, row, "scene.frame")
    for event in result.data.get("events", []):
        _line(console, event, "scene.event")
    if verbose:
        _field(console, "size", f"{result.data.get('width')}x{result.data.get('height')}")
        _field(console, "handled", result.data.get("handled"))
        _render_meta(console, result)


# ── Report renderers ──────────────────────────────────────────────────


def _render_memory(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "style", data.get("label", data.get("style", "")))
    _field(console, "objects", data.get("object_count", 0))
    _field(console, "nodes", data.get("node_count", 0))
    text = Text("  Память, занимаемая сценой: ", style="scene.key")
    text.append(f"{data.get('net_bytes', 0)} байт", style="scene.bytes")
    console.print(text)
    _field(console, "peak_bytes", data.get("peak_bytes", 0))
    if verbose:
        _render_meta(console, result)


def _render_styles(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    default = result.data.get("default")
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Style", style="scene.op", no_wrap=True)
    table.add_column("Label")
    table.add_column("Source", style="dim")
    for item in result.data.get("items", []):
        name = str(item.get("style", ""))
        marker = " *" if name == default else ""
        # Labels come from plugins; render them as text, not markup.
        table.add_row(
            Text(f"{name}{marker}"),
            Text(str(item.get("label", ""))),
            Text(str(item.get("source", ""))),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "scene.error"), (f"  {result.op}", "scene.op"), f" — {msg}"),
        soft_wrap=True,
    )
    if verbose and err is not None:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    # Drawing
    "draw_basic": _render_drawing,
    "draw_test": _render_drawing,
    "draw_decorated": _render_drawing,
    "draw_facade": _render_drawing,
    "clone_scene": _render_clone,
    "export_xml": _render_xml,
    "widgets_demo": _render_widgets,
    # Reports
    "measure_memory": _render_memory,
    "list_styles": _render_styles,
}
