"""Opaque identifier codec: typed ``(table, local_id)`` pairs on the wire.

An opaque (global) identifier is the standard base64 encoding, with padding,
of ``"<Table>:<local_id>"``. Callers never see storage keys directly.

INVARIANT: the codec is canonical. ``from_global_id(to_global_id(t)) == t``
for every TypedId, and ``to_global_id(from_global_id(s)) == s`` for every
string the decoder accepts.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any

from livingthings.domain.types import Table

SEPARATOR = ":"


class InvalidGlobalIdError(ValueError):
    """Raised when a string cannot be decomposed into ``(Table, local_id)``.

    Attributes:
        raw: The offending value exactly as received.
        reason: Short parser diagnostic, for logs only.
    """

    def __init__(self, raw: Any, reason: str) -> None:
        super().__init__(f"Invalid global id {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


@dataclass(frozen=True)
class TypedId:
    """Decoded, table-scoped identifier."""

    table: Table
    local_id: str

    def __post_init__(self) -> None:
        if not isinstance(self.table, Table):
            raise TypeError(f"table must be a Table, got {self.table!r}")
        if not isinstance(self.local_id, str):
            raise TypeError(f"local_id must be a str, got {self.local_id!r}")
        if not self.local_id:
            raise ValueError("local_id must be non-empty")
        try:
            self.local_id.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"local_id is not encodable as UTF-8: {self.local_id!r}") from exc


def to_global_id(typed_id: TypedId) -> str:
    """Serialize *typed_id* to its opaque form. Never fails."""
    text = f"{typed_id.table.value}{SEPARATOR}{typed_id.local_id}"
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def from_global_id(raw: Any) -> TypedId:
    """Parse an opaque identifier back into a :class:`TypedId`.

    Raises:
        InvalidGlobalIdError: if *raw* is not a string, is not canonical
            base64, or does not hold a known table and a non-empty local id.
    """
    if not isinstance(raw, str):
        raise InvalidGlobalIdError(raw, "not_a_string")
    try:
        data = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidGlobalIdError(raw, "bad_base64") from exc
    # Non-zero padding bits decode fine but would re-encode differently.
    if base64.b64encode(data).decode("ascii") != raw:
        raise InvalidGlobalIdError(raw, "non_canonical")
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidGlobalIdError(raw, "bad_utf8") from exc

    table_name, sep, local_id = text.partition(SEPARATOR)
    if not sep:
        raise InvalidGlobalIdError(raw, "missing_separator")
    try:
        table = Table(table_name)
    except ValueError as exc:
        raise InvalidGlobalIdError(raw, "unknown_table") from exc
    if not local_id:
        raise InvalidGlobalIdError(raw, "empty_local_id")
    return TypedId(table=table, local_id=local_id)
