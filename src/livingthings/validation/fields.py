"""Common field validators shared by Animal and Plant inputs.

Each type is a reusable ``Annotated`` pydantic type. Error codes are the
standard pydantic error types (``string_too_short``, ``greater_than`` ...),
so callers get a stable machine-readable code per constraint.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictInt, StrictStr, StringConstraints

from livingthings.domain.types import PlantLifecycle
from livingthings.validation.ids import AnimalRef, LivingThingRef

Name = Annotated[StrictStr, StringConstraints(strip_whitespace=True, min_length=1)]

# days
Lifespan = Annotated[StrictInt, Field(ge=0)]

# pounds
Weight = Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)]

Lifecycle = PlantLifecycle

# Anything living can be eaten by an animal; only animals eat.
Diet = list[LivingThingRef]
EatenBy = list[AnimalRef]

Page = Annotated[StrictInt, Field(ge=0)]
