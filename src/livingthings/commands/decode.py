"""Commands: decode operation arguments, list operations."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

import click

from livingthings.commands._base import LtCommand
from livingthings.validation.args import OPERATIONS, AllLivingThingsArgs, decode_args

if TYPE_CHECKING:
    from livingthings.commands._context import AppContext
    from livingthings.validation.result import DecodeResult


@click.command(
    cls=LtCommand,
    examples="""\
  livingthings decode node args.json
  echo '{"input": {"page": 0}}' | livingthings decode allLivingThings
  livingthings --json decode addLivingThing wolf.json""",
)
@click.argument("operation", type=click.Choice(sorted(OPERATIONS)))
@click.argument("payload", type=click.File("r"), default="-")
@click.pass_obj
def decode(app: AppContext, operation: str, payload: IO[str]) -> None:
    """Decode JSON arguments for OPERATION from PAYLOAD (default: stdin)."""
    try:
        raw = json.load(payload)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Invalid JSON payload: {exc}") from exc
    app.emit(_with_paging(app, decode_args(operation, raw)))


def _with_paging(app: AppContext, result: DecodeResult) -> DecodeResult:
    """Attach the row window for list operations."""
    if not (result.ok and isinstance(result.value, AllLivingThingsArgs)):
        return result
    page_size = app.settings.pagination.page_size
    meta = {"pageSize": page_size, "offset": result.value.input.offset(page_size)}
    return result.model_copy(update={"meta": meta})


@click.command(cls=LtCommand)
@click.pass_obj
def operations(app: AppContext) -> None:
    """List operations whose arguments can be decoded."""
    from livingthings.validation.result import DecodeResult

    items = [{"name": name, "args": model.__name__} for name, model in OPERATIONS.items()]
    app.emit(DecodeResult(ok=True, op="operations", value={"operations": items}))
