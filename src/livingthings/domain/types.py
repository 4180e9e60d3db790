"""Entity tables and classification enums for living things."""

from __future__ import annotations

from enum import StrEnum


class Table(StrEnum):
    """Entity kinds an identifier or record can belong to.

    Values double as the table names embedded in opaque identifiers.
    """

    ANIMAL = "Animal"
    PLANT = "Plant"


class PlantLifecycle(StrEnum):
    """Foliage lifecycle of a plant."""

    EVERGREEN = "EVERGREEN"
    DECIDUOUS = "DECIDUOUS"
    SEMI_DECIDUOUS = "SEMI_DECIDUOUS"


LIVING_THING_TABLES: frozenset[Table] = frozenset({Table.ANIMAL, Table.PLANT})
