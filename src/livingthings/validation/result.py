"""DecodeResult and InputError: the boundary contract for every decoder.

INVARIANT: decoders never raise on malformed caller input. Success and
failure are both DecodeResult values; ``errors`` is non-empty iff ``ok``
is False.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class InputError(BaseModel):
    """One client-facing decode failure.

    Attributes:
        path: Field path to the failure, e.g. ``["input", "id"]``.
        code: Machine-readable error code (``invalid_id``, ``no_value`` ...).
        message: Human-readable text, safe to show callers.
        debug: Parser diagnostics for logs. Never serialized.
    """

    model_config = {"frozen": True}

    path: list[str]
    code: str
    message: str = ""
    debug: dict[str, Any] = Field(default_factory=dict, exclude=True)

    def to_client(self) -> dict[str, Any]:
        return {"path": list(self.path), "code": self.code}

    def to_log(self) -> dict[str, Any]:
        return {"path": ".".join(self.path), "code": self.code, "debug": self.debug}


def errors_from_validation(exc: ValidationError) -> list[InputError]:
    """Flatten a pydantic ValidationError into InputErrors, keeping every entry."""
    errors: list[InputError] = []
    for entry in exc.errors(include_url=False):
        ctx = entry.get("ctx") or {}
        errors.append(
            InputError(
                path=[str(part) for part in entry["loc"]],
                code=entry["type"],
                message=entry["msg"],
                debug=dict(ctx.get("debug") or {}),
            )
        )
    return errors


class DecodeResult(BaseModel):
    """Outcome of decoding one operation's arguments.

    Attributes:
        ok: Whether the arguments decoded cleanly.
        op: Operation name (e.g. ``"addLivingThing"``).
        value: The decoded argument model on success.
        errors: Every problem found, on failure.
        meta: Optional extras for the caller (paging hints, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    value: Any = None
    errors: list[InputError] = Field(default_factory=list)
    meta: dict[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Client-safe payload: decoded arguments, or an ``InputError`` union member."""
        if self.ok:
            if isinstance(self.value, BaseModel):
                return self.value.model_dump(mode="json", by_alias=True)
            return dict(self.value or {})
        return {
            "__typename": "InputError",
            "errors": [error.to_client() for error in self.errors],
        }
