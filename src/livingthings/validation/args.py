"""Top-level argument decoders for each query and mutation.

Every operation's raw arguments go through :func:`decode_args`, which
returns a :class:`DecodeResult` instead of raising.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from livingthings.validation.fields import Page
from livingthings.validation.ids import GlobalId, LivingThingId
from livingthings.validation.inputs import (
    InputModel,
    LivingThingCommand,
    LivingThingPatchInput,
    PatchInput,
)
from livingthings.validation.result import DecodeResult, errors_from_validation

logger = logging.getLogger(__name__)


# --- Queries ---


class NodeArgs(InputModel):
    id: GlobalId


class LivingThingArgs(InputModel):
    id: LivingThingId


class AllLivingThingsInput(InputModel):
    page: Page

    def offset(self, page_size: int) -> int:
        """Index of the first row on this page."""
        return self.page * page_size


class AllLivingThingsArgs(InputModel):
    input: AllLivingThingsInput


# --- Mutations ---


class AddLivingThingInput(InputModel):
    living_thing: LivingThingCommand


class AddLivingThingArgs(InputModel):
    input: AddLivingThingInput


class UpdateLivingThingInput(InputModel):
    id: LivingThingId
    patch: LivingThingPatchInput

    def target_patch(self) -> PatchInput | None:
        """The sub-patch matching the target record's table, if supplied."""
        return self.patch.for_table(self.id.table)


class UpdateLivingThingArgs(InputModel):
    input: UpdateLivingThingInput


class DeleteLivingThingInput(InputModel):
    id: LivingThingId


class DeleteLivingThingArgs(InputModel):
    input: DeleteLivingThingInput


OPERATIONS: dict[str, type[InputModel]] = {
    "node": NodeArgs,
    "livingThing": LivingThingArgs,
    "allLivingThings": AllLivingThingsArgs,
    "addLivingThing": AddLivingThingArgs,
    "updateLivingThing": UpdateLivingThingArgs,
    "deleteLivingThing": DeleteLivingThingArgs,
}


def decode_args(operation: str, raw: Any) -> DecodeResult:
    """Decode *raw* arguments for *operation*.

    Raises:
        KeyError: if *operation* is not registered. This is a caller bug,
            not malformed input.
    """
    model_cls = OPERATIONS[operation]
    try:
        value = model_cls.model_validate(raw)
    except ValidationError as exc:
        errors = errors_from_validation(exc)
        for error in errors:
            logger.debug("input_rejected", extra={"op": operation, **error.to_log()})
        return DecodeResult(ok=False, op=operation, errors=errors)
    return DecodeResult(ok=True, op=operation, value=value)
