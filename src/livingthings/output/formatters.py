"""Rich/JSON output helpers.

The CLI renders DecodeResult for humans (Rich tables and colors) or
machines (--json). The formatter layer adapts DecodeResult to the
requested output mode. Debug payloads are only included when the
settings say the caller is trusted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from livingthings.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from livingthings.validation.result import DecodeResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be presented."""

    json_output: bool = False
    quiet: bool = False
    show_debug: bool = False


def result_to_dict(result: DecodeResult, *, show_debug: bool = False) -> dict[str, Any]:
    """Serialize *result* for machine output."""
    errors: list[dict[str, Any]] = []
    for error in result.errors:
        entry: dict[str, Any] = {**error.to_client(), "message": error.message}
        if show_debug:
            entry["debug"] = error.debug
        errors.append(entry)
    return {
        "ok": result.ok,
        "op": result.op,
        "value": result.to_payload() if result.ok else None,
        "errors": errors,
        **({"meta": result.meta} if result.meta else {}),
    }


def format_result(result: DecodeResult, *, settings: OutputSettings | None = None) -> str:
    """Format a DecodeResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return json.dumps(
            result_to_dict(result, show_debug=settings.show_debug),
            indent=2,
            default=str,
        )
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, show_debug=settings.show_debug)
