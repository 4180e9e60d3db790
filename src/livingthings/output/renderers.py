"""Rich renderers for DecodeResult.

Output is rendered into an in-memory Console and returned as a string, so
the CLI decides where it goes (stdout on success, stderr on failure). Rich
drops color codes automatically when nothing is a terminal (tests, pipes).
"""

from __future__ import annotations

import json
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from livingthings.validation.result import DecodeResult

THEME = Theme(
    {
        "lt.ok": "bold green",
        "lt.error": "bold red",
        "lt.op": "bold cyan",
        "lt.key": "dim",
        "lt.id": "bold blue",
        "lt.path": "bold",
        "lt.code": "yellow",
        "lt.tag.animal": "magenta",
        "lt.tag.plant": "green",
    }
)


def _console(width: int = 120) -> Console:
    return Console(file=StringIO(), theme=THEME, highlight=False, width=width)


def _text_of(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")


def render_result(result: DecodeResult, *, show_debug: bool = False) -> str:
    """Render *result* as styled text: fields on success, an error table otherwise."""
    console = _console()
    if result.ok:
        _render_success(result, console)
    else:
        _render_errors(result, console, show_debug=show_debug)
    return _text_of(console)


def render_quiet(result: DecodeResult) -> str:
    """One line: ``OK: op`` or ``ERROR: op (codes)``."""
    if result.ok:
        return f"OK: {result.op}"
    codes = ", ".join(sorted({error.code for error in result.errors}))
    return f"ERROR: {result.op} ({codes})"


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        rendered = Text(json.dumps(value, separators=(",", ":")))
    elif key == "id":
        rendered = Text(str(value), style="lt.id")
    elif key == "tag":
        style = f"lt.tag.{str(value).lower()}"
        rendered = Text(str(value), style=style if style in THEME.styles else "")
    else:
        rendered = Text(str(value))
    console.print(Text(f"  {key}: ", style="lt.key"), rendered, sep="")


def _render_success(result: DecodeResult, console: Console) -> None:
    console.print(Text("OK", style="lt.ok"), Text(f"  {result.op}", style="lt.op"))
    for key, value in result.to_payload().items():
        _field(console, key, value)


def _render_errors(result: DecodeResult, console: Console, *, show_debug: bool) -> None:
    count = len(result.errors)
    console.print(
        Text("ERROR", style="lt.error"),
        Text(f"  {result.op}", style="lt.op"),
        Text(f": {count} input error{'s' if count != 1 else ''}"),
    )
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Path", style="lt.path")
    table.add_column("Code", style="lt.code")
    table.add_column("Message")
    if show_debug:
        table.add_column("Debug", style="dim")
    for error in result.errors:
        row = [".".join(error.path) or "(root)", error.code, error.message]
        if show_debug:
            row.append(json.dumps(error.debug, default=str) if error.debug else "")
        table.add_row(*(Text(cell) for cell in row))
    console.print(table)
