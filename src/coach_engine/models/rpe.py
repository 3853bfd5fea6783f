"""Post-workout effort rating (RPE) submission."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidatedRpe:
    """A validated RPE payload for one completed workout result.

    ``rpe`` is the athlete's 1-10 rating of perceived exertion.
    """

    workout_result_id: str
    rpe: int
    notes: str | None = None
    rpe_request_id: str | None = None
