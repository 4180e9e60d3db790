"""Command group: encode and decode opaque identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from livingthings.commands._base import LtGroup
from livingthings.domain.types import Table

if TYPE_CHECKING:
    from livingthings.commands._context import AppContext


@click.group(
    "id",
    cls=LtGroup,
    examples="""\
  livingthings id encode Animal 42
  livingthings id decode QW5pbWFsOjQy
  livingthings --json id decode not-an-id""",
)
def id_group() -> None:
    """Encode and decode opaque identifiers."""


@id_group.command("encode")
@click.argument("table", type=click.Choice([t.value for t in Table]))
@click.argument("local_id")
@click.pass_obj
def encode_cmd(app: AppContext, table: str, local_id: str) -> None:
    """Print the opaque id for LOCAL_ID in TABLE."""
    from livingthings.domain.ids import TypedId, to_global_id
    from livingthings.validation.result import DecodeResult

    try:
        typed_id = TypedId(table=Table(table), local_id=local_id)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="LOCAL_ID") from exc
    value = {"id": to_global_id(typed_id), "table": typed_id.table.value, "localId": local_id}
    app.emit(DecodeResult(ok=True, op="id.encode", value=value))


@id_group.command("decode")
@click.argument("raw")
@click.pass_obj
def decode_cmd(app: AppContext, raw: str) -> None:
    """Print the table and local id behind RAW."""
    from livingthings.validation.args import NodeArgs, decode_args

    result = decode_args("node", {"id": raw})
    if result.ok:
        assert isinstance(result.value, NodeArgs)
        typed_id = result.value.id
        value = {"id": raw, "table": typed_id.table.value, "localId": typed_id.local_id}
        result = result.model_copy(update={"op": "id.decode", "value": value})
    else:
        result = result.model_copy(update={"op": "id.decode"})
    app.emit(result)
