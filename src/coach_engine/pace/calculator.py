"""Personalized pace calculator: per-rep target times from a 1600m baseline.

Each rep's target scales the athlete's own 1600m time linearly with the rep
distance, so a 5:00 miler gets 2:30 for an 800m rep while a 6:00 miler gets
3:00 on the same workout. The workout's nominal target pace is reported as
context but never blended into the time.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from coach_engine.models.enums import REFERENCE_DISTANCE_M
from coach_engine.models.pace import SplitComparison, TargetPace
from coach_engine.pace.structure import normalize_structure

logger = logging.getLogger(__name__)


def _usable_pace(value: Any) -> float | None:
    """Return ``value`` if it is a finite, positive number of seconds."""
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        finite = math.isfinite(value)
    except OverflowError:
        return None
    if not finite or value <= 0:
        return None
    return value


def scale_to_distance(
    distances: Iterable[float], baseline_1600m_s: float
) -> list[int | None]:
    """Scale a 1600m time to each distance, rounding half up to whole seconds.

    A distance whose scaled time overflows a float maps to None.
    """
    meters = np.asarray(list(distances), dtype=np.float64)
    with np.errstate(over="ignore"):
        seconds = np.floor(meters / REFERENCE_DISTANCE_M * baseline_1600m_s + 0.5)
    return [int(s) if np.isfinite(s) else None for s in seconds]


def calculate_personalized_target_paces(
    athlete_baseline_1600m_s: float | None,
    structure: Any,
    workout_target_pace_s: float | None = None,
) -> list[TargetPace]:
    """Calculate a target time for every rep in a workout.

    Args:
        athlete_baseline_1600m_s: Athlete's current 1600m time in seconds.
            Personalization is impossible without it; a missing, non-finite
            or non-positive baseline yields an empty list.
        structure: Raw workout structure payload (see ``normalize_structure``).
        workout_target_pace_s: Workout's nominal pace in seconds per 1600m.
            Reported as ``pace_reference`` when usable; otherwise the
            baseline is reported instead.

    Returns:
        One TargetPace per rep, in workout order. Empty when the baseline is
        unusable or the structure holds no usable reps.
    """
    baseline = _usable_pace(athlete_baseline_1600m_s)
    if baseline is None:
        return []

    reps = normalize_structure(structure)
    if not reps:
        return []

    workout_pace = _usable_pace(workout_target_pace_s)
    pace_reference = baseline if workout_pace is None else workout_pace

    target_times = scale_to_distance((rep.distance for rep in reps), baseline)
    targets: list[TargetPace] = []
    for rep, target_time in zip(reps, target_times):
        if target_time is None:
            logger.debug("Dropping rep %s: target time overflows", rep.rep_number)
            continue
        targets.append(
            TargetPace(
                rep_number=rep.rep_number,
                distance=rep.distance,
                pace_reference=pace_reference,
                target_time=target_time,
            )
        )
    return targets


def pair_splits_with_targets(
    targets: Iterable[TargetPace],
    splits: Iterable[Mapping[str, Any]],
) -> list[SplitComparison]:
    """Pair recorded splits with the target for the same rep number.

    Splits are mappings with ``repNumber``, ``time`` and optionally
    ``offPaceAmount``; splits missing either required key are skipped. A
    split whose rep number has no target gets ``target=None``. If two
    targets share a rep number the later one wins.
    """
    target_by_rep = {t.rep_number: t.target_time for t in targets}
    comparisons: list[SplitComparison] = []
    for split in splits:
        if not isinstance(split, Mapping) or "repNumber" not in split or "time" not in split:
            logger.debug("Skipping split without repNumber/time: %r", split)
            continue
        comparisons.append(
            SplitComparison(
                rep_number=split["repNumber"],
                time=split["time"],
                target=target_by_rep.get(split["repNumber"]),
                deviation=split.get("offPaceAmount"),
            )
        )
    return comparisons
