"""Tests for the opaque identifier codec."""

import base64

import pytest

from livingthings.domain.ids import (
    InvalidGlobalIdError,
    TypedId,
    from_global_id,
    to_global_id,
)
from livingthings.domain.types import Table


def _b64(text: bytes) -> str:
    return base64.b64encode(text).decode("ascii")


class TestToGlobalId:
    def test_known_encoding(self) -> None:
        assert to_global_id(TypedId(Table.ANIMAL, "42")) == "QW5pbWFsOjQy"

    def test_is_base64_of_table_and_local_id(self) -> None:
        raw = to_global_id(TypedId(Table.PLANT, "oak-3"))
        assert base64.b64decode(raw) == b"Plant:oak-3"

    def test_distinct_tables_distinct_ids(self) -> None:
        assert to_global_id(TypedId(Table.ANIMAL, "1")) != to_global_id(TypedId(Table.PLANT, "1"))


class TestRoundTrip:
    @pytest.mark.parametrize(
        "typed_id",
        [
            TypedId(Table.ANIMAL, "1"),
            TypedId(Table.PLANT, "oak-3"),
            TypedId(Table.ANIMAL, "a:b:c"),  # separator inside local id
            TypedId(Table.PLANT, "ünïcødé 🌱"),
            TypedId(Table.ANIMAL, "x" * 500),
        ],
    )
    def test_decode_of_encode_is_identity(self, typed_id: TypedId) -> None:
        assert from_global_id(to_global_id(typed_id)) == typed_id

    @pytest.mark.parametrize("raw", ["QW5pbWFsOjQy", "UGxhbnQ6b2FrLTM=", _b64(b"Animal:a:b")])
    def test_encode_of_decode_is_identity(self, raw: str) -> None:
        assert to_global_id(from_global_id(raw)) == raw


class TestFromGlobalId:
    def test_decodes_table_and_local_id(self) -> None:
        typed_id = from_global_id("QW5pbWFsOjQy")
        assert typed_id.table is Table.ANIMAL
        assert typed_id.local_id == "42"

    @pytest.mark.parametrize(
        "raw,reason",
        [
            (123, "not_a_string"),
            (None, "not_a_string"),
            ("not-an-id", "bad_base64"),
            ("QW5p bWFs", "bad_base64"),
            ("QW5pbWFsOjQ", "bad_base64"),  # missing padding
            ("ÄÖÜ", "bad_base64"),
            ("QW5pbWFsOjR=", "non_canonical"),  # trailing bits set
            (_b64(b"\xff\xfe:1"), "bad_utf8"),
            ("", "missing_separator"),
            (_b64(b"Animal42"), "missing_separator"),
            (_b64(b"Fungus:1"), "unknown_table"),
            (_b64(b"animal:1"), "unknown_table"),  # table names are case-sensitive
            (_b64(b"Animal:"), "empty_local_id"),
        ],
    )
    def test_rejects_garbage(self, raw: object, reason: str) -> None:
        with pytest.raises(InvalidGlobalIdError) as exc_info:
            from_global_id(raw)
        assert exc_info.value.reason == reason
        assert exc_info.value.raw == raw

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_global_id("???")


class TestTypedId:
    def test_frozen(self) -> None:
        typed_id = TypedId(Table.ANIMAL, "1")
        with pytest.raises(AttributeError):
            typed_id.local_id = "2"  # type: ignore[misc]

    def test_rejects_empty_local_id(self) -> None:
        with pytest.raises(ValueError):
            TypedId(Table.PLANT, "")

    def test_rejects_non_table(self) -> None:
        with pytest.raises(TypeError):
            TypedId("Animal", "1")  # type: ignore[arg-type]

    def test_equality_by_value(self) -> None:
        assert TypedId(Table.ANIMAL, "1") == TypedId(Table.ANIMAL, "1")
        assert hash(TypedId(Table.ANIMAL, "1")) == hash(TypedId(Table.ANIMAL, "1"))

    @pytest.mark.parametrize("local_id", [5, b"1", None])
    def test_rejects_non_str_local_id(self, local_id: object) -> None:
        with pytest.raises(TypeError):
            TypedId(Table.ANIMAL, local_id)  # type: ignore[arg-type]

    def test_rejects_lone_surrogate(self) -> None:
        with pytest.raises(ValueError, match="UTF-8"):
            TypedId(Table.ANIMAL, "\ud800")

    def test_every_constructible_id_encodes(self) -> None:
        typed_id = TypedId(Table.PLANT, "fern-é")
        assert from_global_id(to_global_id(typed_id)) == typed_id
