"""
Tests for request schemas and timestamp coercion.
"""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from domain.schemas import MealWrite, MealMetricsResponse, coerce_epoch_millis
from domain.schemas.meal_schemas import MAX_EPOCH_MILLIS


@pytest.mark.parametrize(
    "value,expected",
    [
        (1704372956, 1704372956),
        (1704372956.9, 1704372956),
        ("1704372956", 1704372956),
        ("2021-01-01T08:00:00Z", 1609488000000),
        ("2021-01-01T08:00:00", 1609488000000),
        ("2021-01-01T09:00:00+01:00", 1609488000000),
        ("2021-01-01T08:00:00.123Z", 1609488000123),
        ("2021-01-01", 1609459200000),
        (datetime(2021, 1, 1, 8, tzinfo=timezone.utc), 1609488000000),
        (date(2021, 1, 1), 1609459200000),
        (0, 0),
        (8_640_000_000_000_000, 8_640_000_000_000_000),
        (-8_640_000_000_000_000, -8_640_000_000_000_000),
    ],
)
def test_coerce_epoch_millis(value, expected):
    assert coerce_epoch_millis(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        True,
        False,
        "",
        "tomorrow",
        float("inf"),
        None,
        [],
        {},
        1e20,
        2**63,
        -(2**63),
        "99999999999999999999",
        MAX_EPOCH_MILLIS + 1,
        -MAX_EPOCH_MILLIS - 1,
    ],
)
def test_coerce_epoch_millis_rejects(value):
    with pytest.raises(ValueError):
        coerce_epoch_millis(value)


def test_meal_write_accepts_wire_and_field_names():
    by_alias = MealWrite.model_validate(
        {"name": "a", "description": "b", "date": "2021-01-01", "isOnDiet": True}
    )
    by_name = MealWrite(name="a", description="b", date=1609459200000, is_on_diet=True)

    assert by_alias == by_name
    assert by_alias.date == 1609459200000


def test_meal_write_is_on_diet_is_strict():
    with pytest.raises(ValidationError):
        MealWrite.model_validate(
            {"name": "a", "description": "b", "date": 1, "isOnDiet": 1}
        )


def test_metrics_response_serializes_camel_case():
    metrics = MealMetricsResponse(
        total_meals=2,
        total_meals_on_diet=1,
        total_meals_off_diet=1,
        best_on_diet_sequence=1,
    )

    assert metrics.model_dump(by_alias=True) == {
        "totalMeals": 2,
        "totalMealsOnDiet": 1,
        "totalMealsOffDiet": 1,
        "bestOnDietSequence": 1,
    }
