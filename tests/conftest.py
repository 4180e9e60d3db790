"""Shared pytest fixtures for livingthings tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from livingthings.domain.ids import TypedId, to_global_id
from livingthings.domain.types import Table


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray livingthings.toml is discovered."""
    monkeypatch.delenv("LIVINGTHINGS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def animal_id() -> str:
    """Opaque id of an Animal record."""
    return to_global_id(TypedId(Table.ANIMAL, "wolf-1"))


@pytest.fixture
def other_animal_id() -> str:
    return to_global_id(TypedId(Table.ANIMAL, "bear-7"))


@pytest.fixture
def plant_id() -> str:
    """Opaque id of a Plant record."""
    return to_global_id(TypedId(Table.PLANT, "oak-3"))


@pytest.fixture
def animal_payload(plant_id: str, other_animal_id: str) -> Callable[..., dict[str, Any]]:
    """Factory for a valid AnimalInput payload, with per-test overrides."""

    def build(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": "Wolf",
            "lifespan": 5475,
            "eatenBy": [other_animal_id],
            "diet": [plant_id],
            "weight": 80.0,
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def plant_payload(animal_id: str) -> Callable[..., dict[str, Any]]:
    """Factory for a valid PlantInput payload, with per-test overrides."""

    def build(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": "Oak",
            "lifespan": 36500,
            "lifecycle": "DECIDUOUS",
            "weight": 4000.5,
            "eatenBy": [animal_id],
        }
        payload.update(overrides)
        return payload

    return build
