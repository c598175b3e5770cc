"""Tests for LLM response extraction and sanitization."""

import json

import pytest

from macromate.domain.nutrition import NutritionRecord
from macromate.services.parsing import (
    ParseError,
    extract_json_object,
    normalize_nutrition,
    normalize_workout,
)
from tests.conftest import WORKOUT_REPLY


def test_extracts_object_surrounded_by_prose() -> None:
    record = normalize_nutrition(
        'Here you go: {"name":"Eggs","calories":140,"protein":12,"carbs":1,'
        '"fat":10,"servings":2} thanks!',
        "fallback",
    )

    assert record == NutritionRecord(
        name="Eggs",
        calories=140,
        protein_g=12,
        carbs_g=1,
        fat_g=10,
        fiber_g=0,
        sugar_g=0,
        servings=2,
    )


def test_no_json_raises_parse_error() -> None:
    with pytest.raises(ParseError, match="no JSON object found"):
        normalize_nutrition("no json here", "Two eggs")


def test_malformed_json_raises_parse_error() -> None:
    with pytest.raises(ParseError, match="malformed JSON"):
        normalize_nutrition('{"name": "Eggs", calories: }', "Two eggs")


def test_greedy_match_spanning_two_objects_is_malformed() -> None:
    with pytest.raises(ParseError, match="malformed JSON"):
        extract_json_object('{"a": 1} and {"b": 2}')


def test_non_object_json_raises_parse_error() -> None:
    with pytest.raises(ParseError):
        extract_json_object("[1, 2, 3]")


def test_deeply_nested_json_raises_parse_error() -> None:
    nested = "[" * 100_000 + "]" * 100_000

    with pytest.raises(ParseError, match="malformed JSON"):
        extract_json_object('{"a": ' + nested + "}")


def test_integer_beyond_digit_limit_raises_parse_error() -> None:
    with pytest.raises(ParseError, match="malformed JSON"):
        extract_json_object('{"calories": ' + "1" * 5000 + "}")


def test_integer_too_large_for_float_degrades_to_zero() -> None:
    record = normalize_nutrition('{"calories": 1' + "0" * 400 + "}", "Huge")

    assert record.calories == 0
    assert record.name == "Huge"


def test_clamps_negative_values_and_servings() -> None:
    record = normalize_nutrition('{"calories":-5,"servings":0}', "fallback")

    assert record.name == "fallback"
    assert record.calories == 0
    assert record.servings == 1
    assert record.protein_g == 0
    assert record.carbs_g == 0
    assert record.fat_g == 0
    assert record.fiber_g == 0
    assert record.sugar_g == 0


def test_non_numeric_fields_degrade_to_defaults() -> None:
    record = normalize_nutrition(
        '{"name": "", "calories": "lots", "protein": "12.5", "fat": null, '
        '"carbs": [1], "fiber": true, "servings": "two"}',
        "x" * 80,
    )

    assert record.name == "x" * 50
    assert record.calories == 0
    assert record.protein_g == 12.5
    assert record.fat_g == 0
    assert record.carbs_g == 0
    assert record.fiber_g == 0
    assert record.servings == 1


def test_fractional_servings_are_raised_to_one() -> None:
    record = normalize_nutrition('{"servings": 0.5}', "snack")

    assert record.servings == 1


def test_renormalizing_serialized_record_is_stable() -> None:
    first = normalize_nutrition(
        'ok {"name":"Oats","calories":300.5,"protein":10,"carbs":54,"fat":6,'
        '"fiber":8,"sugar":1,"servings":1.5}',
        "fallback",
    )

    second = normalize_nutrition(json.dumps(first.to_payload()), "other")

    assert second == first


def test_normalize_workout_reads_plan() -> None:
    plan = normalize_workout(WORKOUT_REPLY)

    assert plan.title == "Full Body Strength"
    assert plan.duration_minutes == 30
    assert plan.difficulty == "intermediate"
    assert plan.equipment == ["dumbbells"]
    assert [exercise.name for exercise in plan.exercises] == [
        "Goblet squat",
        "Push-up",
    ]
    assert plan.exercises[0].notes is None
    assert plan.exercises[1].notes == "Knees down to regress"
    assert plan.safety_notes == ["Warm up for five minutes"]


def test_normalize_workout_defaults_missing_lists() -> None:
    plan = normalize_workout('{"title": "Quick HIIT", "difficulty": "expert"}')

    assert plan.title == "Quick HIIT"
    assert plan.difficulty is None
    assert plan.equipment == []
    assert plan.exercises == []
    assert plan.safety_notes == []


def test_normalize_workout_coerces_exercise_fields() -> None:
    plan = normalize_workout(
        '{"exercises": [{"name": "Plank", "sets": "0", "reps": 30, "rest": 15}, '
        '"not an exercise"], "equipment": "mat"}'
    )

    assert plan.title == "Workout"
    assert plan.equipment == []
    assert len(plan.exercises) == 1
    assert plan.exercises[0].sets == 1
    assert plan.exercises[0].reps == "30"
    assert plan.exercises[0].rest == "15"


def test_normalize_workout_without_json_raises() -> None:
    with pytest.raises(ParseError):
        normalize_workout("I cannot help with that.")
