"""Extraction and sanitization of structured data from LLM text responses."""

import json
import re

from macromate.domain.nutrition import NutritionRecord, UntrustedPayload
from macromate.domain.workouts import FITNESS_LEVELS, Exercise, WorkoutPlanDraft
from macromate.numbers import round_half_up, to_finite_float

_JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")

FALLBACK_NAME_LENGTH = 50

# Payload key -> record field.
_NUTRIENT_FIELDS: dict[str, str] = {
    "calories": "calories",
    "protein": "protein_g",
    "carbs": "carbs_g",
    "fat": "fat_g",
    "fiber": "fiber_g",
    "sugar": "sugar_g",
}


class ParseError(ValueError):
    """Raised when an LLM response does not contain a usable JSON object."""


def extract_json_object(raw_text: str) -> UntrustedPayload:
    """Return the JSON object spanning the first '{' to the last '}'."""
    match = _JSON_OBJECT_PATTERN.search(raw_text or "")
    if match is None:
        raise ParseError("no JSON object found")
    try:
        decoded = json.loads(match.group(0))
    except (ValueError, RecursionError) as exc:
        raise ParseError("malformed JSON") from exc
    if not isinstance(decoded, dict):
        raise ParseError("malformed JSON")
    return UntrustedPayload(decoded)


def sanitize_nutrition(
    payload: UntrustedPayload, fallback_name: str
) -> NutritionRecord:
    """Coerce and clamp nutrition fields; never raises."""
    values = {
        field: max(0.0, to_finite_float(payload.get(key)) or 0.0)
        for key, field in _NUTRIENT_FIELDS.items()
    }
    servings = max(1.0, to_finite_float(payload.get("servings")) or 1.0)
    name = payload.get("name")
    if not isinstance(name, str) or not name:
        name = fallback_name[:FALLBACK_NAME_LENGTH]
    return NutritionRecord(name=name, servings=servings, **values)


def normalize_nutrition(raw_text: str, fallback_name: str) -> NutritionRecord:
    """Parse an LLM nutrition response into a sanitized record."""
    return sanitize_nutrition(extract_json_object(raw_text), fallback_name)


def sanitize_workout(payload: UntrustedPayload) -> WorkoutPlanDraft:
    """Coerce workout plan fields, defaulting missing lists to empty."""
    title = payload.get("title")
    description = payload.get("description")
    duration = to_finite_float(payload.get("duration_minutes"))
    minutes = max(0, round_half_up(duration)) if duration is not None else None
    difficulty = payload.get("difficulty")
    return WorkoutPlanDraft(
        title=title if isinstance(title, str) and title else "Workout",
        description=description if isinstance(description, str) else None,
        duration_minutes=minutes,
        difficulty=difficulty if difficulty in FITNESS_LEVELS else None,
        equipment=_string_list(payload.get("equipment")),
        exercises=[
            _sanitize_exercise(item)
            for item in _list(payload.get("exercises"))
            if isinstance(item, dict)
        ],
        safety_notes=_string_list(payload.get("safety_notes")),
    )


def normalize_workout(raw_text: str) -> WorkoutPlanDraft:
    """Parse an LLM workout response into a sanitized plan draft."""
    return sanitize_workout(extract_json_object(raw_text))


def _sanitize_exercise(item: dict[str, object]) -> Exercise:
    sets = to_finite_float(item.get("sets"))
    notes = item.get("notes")
    return Exercise(
        name=_text(item.get("name")) or "Exercise",
        sets=max(1, round_half_up(sets)) if sets is not None else 1,
        reps=_text(item.get("reps")),
        rest=_text(item.get("rest")),
        notes=notes if isinstance(notes, str) and notes else None,
    )


def _list(value: object) -> list[object]:
    return value if isinstance(value, list) else []


def _string_list(value: object) -> list[str]:
    return [item for item in _list(value) if isinstance(item, str) and item]


def _text(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, int | float):
        number = to_finite_float(value)
        if number is None:
            return ""
        return str(int(number)) if number.is_integer() else str(number)
    return ""
