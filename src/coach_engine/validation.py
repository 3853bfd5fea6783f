"""Athlete submission payload validation.

Turns a raw request body (decoded JSON) into a typed ValidatedCheckIn or
ValidatedRpe, or raises WellnessValidationError listing every field that
failed. This is the guard that lets the alert engine skip range checks of
its own.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

from coach_engine.exceptions import WellnessValidationError
from coach_engine.models.enums import (
    ILLNESS_NOTES_MAX_CHARS,
    NOTES_MAX_CHARS,
    RPE_NOTES_MAX_CHARS,
    SCORE_MAX,
    SCORE_MIN,
    SLEEP_HOURS_MAX,
    SLEEP_HOURS_MIN,
    SLEEP_HOURS_STEP,
    SORENESS_NOTES_MAX_CHARS,
    FoodTiming,
    IllnessSymptom,
    SorenessArea,
)
from coach_engine.models.rpe import ValidatedRpe
from coach_engine.models.wellness import ValidatedCheckIn, WellnessSubmission

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

# Request field -> WellnessSubmission attribute, for the 1-10 scores
_SCORE_FIELDS = {
    "sleepQuality": "sleep_quality",
    "hydration": "hydration",
    "energy": "energy",
    "motivation": "motivation",
    "focus": "focus",
}


def _is_int_in_range(value: Any, low: int, high: int) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return isinstance(value, int) and low <= value <= high


def _valid_sleep_hours(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        finite = math.isfinite(value)
    except OverflowError:
        return False
    if not finite or not SLEEP_HOURS_MIN <= value <= SLEEP_HOURS_MAX:
        return False
    return (value / SLEEP_HOURS_STEP) % 1 == 0


def _valid_uuid(value: Any) -> bool:
    return isinstance(value, str) and _UUID_RE.match(value) is not None


def _allowed(enum_cls: type[Enum]) -> str:
    return ", ".join(member.value for member in enum_cls)


def _tag_list(
    body: Mapping[str, Any], key: str, enum_cls: type[Enum], errors: list[str]
) -> tuple:
    value = body.get(key)
    if not isinstance(value, list):
        errors.append(f"{key} must be an array.")
        return ()
    allowed = {member.value for member in enum_cls}
    invalid = [str(v) for v in value if not isinstance(v, str) or v not in allowed]
    if invalid:
        errors.append(
            f"{key} contains invalid values: {', '.join(invalid)}. "
            f"Allowed: {_allowed(enum_cls)}."
        )
        return ()
    if len(set(value)) != len(value):
        errors.append(f"{key} must not contain duplicates.")
        return ()
    return tuple(enum_cls(v) for v in value)


def _optional_text(
    body: Mapping[str, Any], key: str, max_chars: int, errors: list[str]
) -> str | None:
    value = body.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        errors.append(f"{key} must be a string.")
        return None
    if len(value) > max_chars:
        errors.append(f"{key} must be at most {max_chars} characters.")
        return None
    return value


def validate_wellness_input(body: Any) -> ValidatedCheckIn:
    """Validate a raw check-in body.

    Args:
        body: Decoded JSON request body, camelCase keys.

    Returns:
        ValidatedCheckIn wrapping a WellnessSubmission.

    Raises:
        WellnessValidationError: listing every invalid field.
    """
    if not isinstance(body, Mapping):
        raise WellnessValidationError(["Request body must be a JSON object."])

    errors: list[str] = []

    if not _valid_sleep_hours(body.get("sleepHours")):
        errors.append(
            f"sleepHours must be a number between {SLEEP_HOURS_MIN} and "
            f"{SLEEP_HOURS_MAX} in {SLEEP_HOURS_STEP} increments."
        )

    for key in _SCORE_FIELDS:
        if not _is_int_in_range(body.get(key), SCORE_MIN, SCORE_MAX):
            errors.append(f"{key} must be an integer between {SCORE_MIN} and {SCORE_MAX}.")

    food_timing = body.get("foodTiming")
    if food_timing not in {f.value for f in FoodTiming}:
        errors.append(f"foodTiming must be one of: {_allowed(FoodTiming)}.")

    soreness = _tag_list(body, "sorenessAreas", SorenessArea, errors)
    illness = _tag_list(body, "illnessSymptoms", IllnessSymptom, errors)

    notes = _optional_text(body, "notes", NOTES_MAX_CHARS, errors)
    soreness_notes = _optional_text(body, "sorenessNotes", SORENESS_NOTES_MAX_CHARS, errors)
    illness_notes = _optional_text(body, "illnessNotes", ILLNESS_NOTES_MAX_CHARS, errors)

    request_id = body.get("wellnessRequestId")
    if request_id is not None and not _valid_uuid(request_id):
        errors.append("wellnessRequestId must be a valid UUID.")

    if errors:
        raise WellnessValidationError(errors)

    submission = WellnessSubmission(
        sleep_hours=float(body["sleepHours"]),
        food_timing=FoodTiming(food_timing),
        soreness_areas=soreness,
        illness_symptoms=illness,
        **{attr: int(body[key]) for key, attr in _SCORE_FIELDS.items()},
    )
    return ValidatedCheckIn(
        submission=submission,
        notes=notes,
        soreness_notes=soreness_notes,
        illness_notes=illness_notes,
        wellness_request_id=request_id,
    )


def validate_rpe_input(body: Any) -> ValidatedRpe:
    """Validate a raw post-workout RPE body.

    Requires ``workoutResultId`` (UUID) and ``rpe`` (integer 1-10); accepts
    optional ``notes`` and ``rpeRequestId`` (UUID).

    Raises:
        WellnessValidationError: listing every invalid field.
    """
    if not isinstance(body, Mapping):
        raise WellnessValidationError(["Request body must be a JSON object."])

    errors: list[str] = []

    workout_result_id = body.get("workoutResultId")
    if not _valid_uuid(workout_result_id):
        errors.append("workoutResultId is required and must be a valid UUID.")

    rpe = body.get("rpe")
    if not _is_int_in_range(rpe, SCORE_MIN, SCORE_MAX):
        errors.append(
            f"rpe is required and must be an integer between {SCORE_MIN} and {SCORE_MAX}."
        )

    notes = _optional_text(body, "notes", RPE_NOTES_MAX_CHARS, errors)

    rpe_request_id = body.get("rpeRequestId")
    if rpe_request_id is not None and not _valid_uuid(rpe_request_id):
        errors.append("rpeRequestId must be a valid UUID.")

    if errors:
        raise WellnessValidationError(errors)

    return ValidatedRpe(
        workout_result_id=workout_result_id,
        rpe=int(rpe),
        notes=notes,
        rpe_request_id=rpe_request_id,
    )
