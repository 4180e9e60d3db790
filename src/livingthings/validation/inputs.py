"""Entity input models and the polymorphic LivingThing discriminator.

Animal and Plant inputs are composed from the common LivingThing fields
plus their entity-specific fields. Pydantic validates every field
independently, so all field errors in one payload are reported together.

``LivingThingInput`` has no native "exactly one of" shape on the wire: a
payload offers ``animal`` and ``plant`` keys and :func:`resolve_variant`
gates on how many are present before either sub-payload is decoded. The
result is the sum type ``AnimalCommand | PlantCommand``, tagged by ``tag``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Discriminator, Tag, computed_field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from livingthings.domain.types import Table
from livingthings.validation.fields import Diet, EatenBy, Lifecycle, Lifespan, Name, Weight


class InputModel(BaseModel):
    """Base for every boundary model: camelCase wire keys, no extras, frozen."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid", frozen=True)


# --- Create inputs ---


class LivingThingFields(InputModel):
    """Fields shared by every living thing."""

    name: Name
    lifespan: Lifespan
    weight: Weight


class AnimalInput(LivingThingFields):
    diet: Diet
    eaten_by: EatenBy


class PlantInput(LivingThingFields):
    lifecycle: Lifecycle
    eaten_by: EatenBy


# --- Storage shapes ---
# Relations (diet, eatenBy) live in their own tables, so records carry
# scalar columns only.


class AnimalRecord(LivingThingFields):
    """Animal row as persisted: the common fields only."""


class PlantRecord(LivingThingFields):
    """Plant row as persisted: the common fields plus ``lifecycle``."""

    lifecycle: Lifecycle


class AnimalCommand(AnimalInput):
    """Resolved ``animal`` variant of a LivingThingInput.

    ``tag`` is computed, never read from input, so a caller-supplied
    ``tag`` key is rejected like any other unknown field.
    """

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tag(self) -> Table:
        return Table.ANIMAL

    def record(self) -> AnimalRecord:
        return AnimalRecord(name=self.name, lifespan=self.lifespan, weight=self.weight)


class PlantCommand(PlantInput):
    """Resolved ``plant`` variant of a LivingThingInput."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tag(self) -> Table:
        return Table.PLANT

    def record(self) -> PlantRecord:
        return PlantRecord(
            name=self.name,
            lifespan=self.lifespan,
            weight=self.weight,
            lifecycle=self.lifecycle,
        )


# Wire key -> table of the variant it selects.
VARIANT_KEYS: dict[str, Table] = {"animal": Table.ANIMAL, "plant": Table.PLANT}


class _Resolved(dict[str, Any]):
    """Sub-payload of the chosen variant, carrying the wire key that chose it."""

    def __init__(self, key: str, payload: Mapping[str, Any]) -> None:
        super().__init__(payload)
        self.key = key


def resolve_variant(value: Any) -> Any:
    """Collapse ``{animal?, plant?}`` into the chosen sub-payload.

    Presence is counted by key, so ``{"animal": {}, "plant": {...}}`` is
    ``multiple_values`` even though one side is empty. A key holding
    ``None`` still counts as present.
    """
    if not isinstance(value, Mapping):
        raise PydanticCustomError("model_type", "Input should be an object")

    present = [key for key in VARIANT_KEYS if key in value]
    if len(present) > 1:
        raise PydanticCustomError(
            "multiple_values",
            "Exactly one of {keys} may be given",
            {"keys": ", ".join(present)},
        )
    unknown = sorted(str(key) for key in value if key not in VARIANT_KEYS)
    if unknown:
        raise PydanticCustomError(
            "extra_forbidden",
            "Unexpected key(s): {keys}",
            {"keys": ", ".join(unknown)},
        )
    if not present or value[present[0]] is None:
        raise PydanticCustomError("no_value", "One of animal, plant is required")

    key = present[0]
    payload = value[key]
    if not isinstance(payload, Mapping):
        raise PydanticCustomError(
            "model_type",
            "{variant} should be an object",
            {"variant": key},
        )
    return _Resolved(key, payload)


def _variant_key(value: Any) -> str | None:
    if isinstance(value, _Resolved):
        return value.key
    if isinstance(value, AnimalCommand):
        return "animal"
    if isinstance(value, PlantCommand):
        return "plant"
    return None


# Tags are the wire keys, so error paths read ``livingThing.animal.name``.
LivingThingCommand = Annotated[
    Union[
        Annotated[AnimalCommand, Tag("animal")],
        Annotated[PlantCommand, Tag("plant")],
    ],
    Discriminator(_variant_key),
    BeforeValidator(resolve_variant),
]


# --- Patch inputs ---


class PatchInput(InputModel):
    """All-optional field set. ``None`` means "leave unchanged"."""

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller actually set, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class AnimalPatchInput(PatchInput):
    name: Name | None = None
    lifespan: Lifespan | None = None
    diet: Diet | None = None


class PlantPatchInput(PatchInput):
    name: Name | None = None
    lifespan: Lifespan | None = None
    lifecycle: Lifecycle | None = None
    weight: Weight | None = None


class LivingThingPatchInput(InputModel):
    """Both sub-patches may be present; the target's table picks one."""

    animal: AnimalPatchInput | None = None
    plant: PlantPatchInput | None = None

    def for_table(self, table: Table) -> PatchInput | None:
        """Return the sub-patch that applies to records of *table*."""
        return self.animal if table is Table.ANIMAL else self.plant
