"""Tests for the common LivingThing field validators."""

from __future__ import annotations

import math

import pytest
from pydantic import TypeAdapter, ValidationError

from livingthings.domain.types import PlantLifecycle
from livingthings.validation.fields import Lifecycle, Lifespan, Name, Page, Weight


def _error_type(annotation: object, value: object) -> str:
    with pytest.raises(ValidationError) as exc_info:
        TypeAdapter(annotation).validate_python(value)
    return exc_info.value.errors()[0]["type"]


class TestName:
    def test_strips_whitespace(self) -> None:
        assert TypeAdapter(Name).validate_python("  Wolf ") == "Wolf"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_rejected(self, value: str) -> None:
        assert _error_type(Name, value) == "string_too_short"

    def test_non_string_rejected(self) -> None:
        assert _error_type(Name, 5) == "string_type"


class TestLifespan:
    def test_zero_allowed(self) -> None:
        assert TypeAdapter(Lifespan).validate_python(0) == 0

    def test_negative_rejected(self) -> None:
        assert _error_type(Lifespan, -1) == "greater_than_equal"

    @pytest.mark.parametrize("value", ["10", 1.5, True])
    def test_non_int_rejected(self, value: object) -> None:
        assert _error_type(Lifespan, value) == "int_type"


class TestWeight:
    def test_int_widened_to_float(self) -> None:
        weight = TypeAdapter(Weight).validate_python(80)
        assert weight == 80.0
        assert isinstance(weight, float)

    @pytest.mark.parametrize("value", [0, 0.0, -3.5])
    def test_non_positive_rejected(self, value: float) -> None:
        assert _error_type(Weight, value) == "greater_than"

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_non_finite_rejected(self, value: float) -> None:
        assert _error_type(Weight, value) == "finite_number"

    def test_string_rejected(self) -> None:
        assert _error_type(Weight, "80") == "float_type"


class TestLifecycle:
    def test_accepts_member_name(self) -> None:
        assert TypeAdapter(Lifecycle).validate_python("SEMI_DECIDUOUS") is PlantLifecycle.SEMI_DECIDUOUS

    def test_unknown_rejected(self) -> None:
        assert _error_type(Lifecycle, "PERENNIAL") == "enum"


class TestPage:
    def test_negative_rejected(self) -> None:
        assert _error_type(Page, -1) == "greater_than_equal"
