"""Frozen wellness submission, the sole input to AlertEngine.evaluate()."""

from __future__ import annotations

from dataclasses import dataclass, field

from coach_engine.models.enums import FoodTiming, IllnessSymptom, SorenessArea


@dataclass(frozen=True)
class WellnessSubmission:
    """Immutable snapshot of one daily wellness check-in.

    Fields are assumed validated (see ``coach_engine.validation``); the
    alert engine does not re-check ranges. Scores are 1-10, higher = better.
    Soreness areas and symptoms keep the order the athlete selected them in;
    duplicates are rejected upstream.
    """

    sleep_hours: float  # 4.0-12.0 in 0.5 steps
    sleep_quality: int
    hydration: int
    energy: int
    motivation: int
    focus: int
    food_timing: FoodTiming
    soreness_areas: tuple[SorenessArea, ...] = field(default_factory=tuple)
    illness_symptoms: tuple[IllnessSymptom, ...] = field(default_factory=tuple)

    @property
    def soreness_count(self) -> int:
        return len(self.soreness_areas)

    @property
    def illness_count(self) -> int:
        return len(self.illness_symptoms)


@dataclass(frozen=True)
class ValidatedCheckIn:
    """A validated check-in payload: the scored submission plus free text."""

    submission: WellnessSubmission
    notes: str | None = None
    soreness_notes: str | None = None
    illness_notes: str | None = None
    wellness_request_id: str | None = None
