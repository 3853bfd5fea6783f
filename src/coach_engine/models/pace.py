"""Pace models: normalized reps, per-rep targets and split comparisons."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rep:
    """A single timed interval. Distance is in metres."""

    rep_number: float  # normally a 1-based int; malformed input may carry any finite number
    distance: float


@dataclass(frozen=True)
class TargetPace:
    """Personalized target for one rep.

    ``pace_reference`` is informational (seconds per 1600m); the target time
    is always scaled from the athlete's own baseline.
    """

    rep_number: float
    distance: float
    pace_reference: float
    target_time: int  # seconds


@dataclass(frozen=True)
class SplitComparison:
    """A recorded split paired with the target it should be judged against."""

    rep_number: float
    time: float
    target: int | None = None
    deviation: float | None = None
