"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer. Labels are printed as ``Text``,
never as markup, so user-supplied brackets render literally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from graphwalk.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphwalk.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        _status_line(console, result)
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the answer."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "items" in data:
        return "\n".join(str(item) for item in data["items"])
    if "word" in data:
        return str(data["word"])
    if "reachable" in data:
        return "true" if data["reachable"] else "false"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="gw.ok"), Text(f"  {result.op}", style="gw.op"), sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="gw.key"), Text(str(value), style=style), sep="")


def _items(console: Console, items: list[Any]) -> None:
    for item in items:
        console.print(Text("    - "), Text(str(item), style="gw.label"), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append(f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="gw.error"),
        Text(f"  {result.op}", style="gw.op"),
        Text(f" — {msg}"),
        sep="",
    )


# ── Op renderers ──────────────────────────────────────────────────────


def _render_word_list(result: ServiceResult, console: Console) -> None:
    data = result.data
    _field(console, "start", data.get("start", ""), "gw.node")
    if "k" in data:
        _field(console, "k", data["k"])
    _field(console, "mode", data.get("mode", ""))
    _field(console, "count", data.get("count", 0))
    _items(console, data.get("items", []))


def _render_longest_word(result: ServiceResult, console: Console) -> None:
    data = result.data
    _field(console, "start", data.get("start", ""), "gw.node")
    _field(console, "mode", data.get("mode", ""))
    _field(console, "word", data.get("word", ""), "gw.label")
    _field(console, "length", data.get("length", 0))


def _render_can_reach(result: ServiceResult, console: Console) -> None:
    data = result.data
    found = bool(data.get("reachable"))
    line = Text("  ")
    line.append(str(data.get("start", "")), style="gw.node")
    line.append(" -> ")
    line.append(str(data.get("destination", "")), style="gw.node")
    line.append(": ")
    line.append("reachable" if found else "not reachable", style="gw.yes" if found else "gw.no")
    console.print(line)


def _render_unreachable(result: ServiceResult, console: Console) -> None:
    data = result.data
    _field(console, "start", data.get("start", ""), "gw.node")
    _field(console, "count", data.get("count", 0))
    _items(console, data.get("items", []))


def _render_generic(result: ServiceResult, console: Console) -> None:
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "short_words": _render_word_list,
    "self_loopers": _render_word_list,
    "longest_word": _render_longest_word,
    "can_reach": _render_can_reach,
    "unreachable": _render_unreachable,
}
