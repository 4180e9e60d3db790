"""Typed identifier validators and foreign-key re-encoding.

Each validator is a plain function usable as a pydantic ``PlainValidator``.
Failures raise :class:`~pydantic_core.PydanticCustomError` with error type
``invalid_id``. Parser diagnostics travel in ``ctx["debug"]`` and are
stripped before errors reach untrusted callers.

Pipeline for foreign keys (``diet``/``eatenBy`` elements)::

    raw str -> from_global_id -> restrict(tables) -> to_global_id -> str
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator
from pydantic_core import PydanticCustomError

from livingthings.domain.ids import InvalidGlobalIdError, TypedId, from_global_id, to_global_id
from livingthings.domain.types import Table

INVALID_ID = "invalid_id"


def parse_global_id(value: Any) -> TypedId:
    """Decode an opaque id of any table."""
    try:
        return from_global_id(value)
    except InvalidGlobalIdError as exc:
        raise PydanticCustomError(
            INVALID_ID,
            "Invalid id",
            {"debug": {"type": type(exc).__name__, "reason": exc.reason, "data": exc.raw}},
        ) from exc


def restrict(*tables: Table) -> Callable[[TypedId], TypedId]:
    """Build a check that only lets ids of *tables* through."""
    allowed = frozenset(tables)
    names = ", ".join(sorted(t.value for t in allowed))

    def check(typed_id: TypedId) -> TypedId:
        if typed_id.table not in allowed:
            raise PydanticCustomError(
                INVALID_ID,
                "Id must reference one of: {allowed}",
                {"allowed": names},
            )
        return typed_id

    return check


def typed_id_validator(*tables: Table) -> Callable[[Any], TypedId]:
    """Decode then restrict to *tables*."""
    check = restrict(*tables)

    def validate(value: Any) -> TypedId:
        return check(parse_global_id(value))

    return validate


def foreign_key_validator(*tables: Table) -> Callable[[Any], str]:
    """Decode, restrict to *tables*, and re-encode for storage."""
    validate = typed_id_validator(*tables)

    def reencode(value: Any) -> str:
        return to_global_id(validate(value))

    return reencode


_serialize_id = PlainSerializer(to_global_id, return_type=str)

# Decoded ids are handed to resolvers as TypedId, dumped back as opaque strings.
GlobalId = Annotated[TypedId, PlainValidator(parse_global_id), _serialize_id]
AnimalId = Annotated[TypedId, PlainValidator(typed_id_validator(Table.ANIMAL)), _serialize_id]
LivingThingId = Annotated[
    TypedId,
    PlainValidator(typed_id_validator(Table.ANIMAL, Table.PLANT)),
    _serialize_id,
]

# Foreign keys are validated, then stored in opaque form.
AnimalRef = Annotated[str, PlainValidator(foreign_key_validator(Table.ANIMAL))]
LivingThingRef = Annotated[str, PlainValidator(foreign_key_validator(Table.ANIMAL, Table.PLANT))]
