"""Threshold tables for the alert rule sets.

Every band is closed and expressed through its upper (or lower) edge so that
bands for the same metric cannot overlap: a "high" band always starts just
above the "critical" edge. Tables are frozen and injected when a rule set
is built; nothing here is read at evaluation time.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from coach_engine.exceptions import RuleConfigurationError


def _check_order(table: object, pairs: list[tuple[str, str]]) -> None:
    """Raise if any ``(tighter, looser)`` edge pair is inverted."""
    for tighter, looser in pairs:
        if getattr(table, tighter) > getattr(table, looser):
            raise RuleConfigurationError(
                f"{type(table).__name__}: {tighter}={getattr(table, tighter)} "
                f"exceeds {looser}={getattr(table, looser)}"
            )


@dataclass(frozen=True)
class StandardThresholds:
    """Thresholds for the "standard" rule set.

    Score edges are inclusive maxima on the 1-10 scale; count edges are
    inclusive minima on the number of tags reported.
    """

    # hydration: <=3 critical, 4-5 high
    hydration_critical_max: int = 3
    hydration_high_max: int = 5

    # energy: <=3 critical, 4-5 low
    energy_critical_max: int = 3
    energy_low_max: int = 5

    # sleep hours: <=4.0 critical, (4.0, 5.0] high
    sleep_hours_critical_max: float = 4.0
    sleep_hours_high_max: float = 5.0

    # sleep quality: <=4 high, 5-6 medium
    sleep_quality_high_max: int = 4
    sleep_quality_medium_max: int = 6

    motivation_medium_max: int = 4
    focus_medium_max: int = 4

    # illness: >=3 critical, 1-2 high
    illness_critical_min: int = 3

    # soreness: >=3 high, 1-2 low
    soreness_high_min: int = 3

    # overtraining: energy AND sleep both low
    compound_energy_max: int = 4
    compound_sleep_hours_max: float = 5.0

    def __post_init__(self) -> None:
        _check_order(
            self,
            [
                ("hydration_critical_max", "hydration_high_max"),
                ("energy_critical_max", "energy_low_max"),
                ("sleep_hours_critical_max", "sleep_hours_high_max"),
                ("sleep_quality_high_max", "sleep_quality_medium_max"),
            ],
        )
        if self.illness_critical_min < 1 or self.soreness_high_min < 1:
            raise RuleConfigurationError(
                f"{type(self).__name__}: count thresholds must be at least 1"
            )


@dataclass(frozen=True)
class BandedThresholds:
    """Thresholds for the "banded" rule set (one band table per metric)."""

    # hydration: <=2 critical, 3-4 high
    hydration_critical_max: int = 2
    hydration_high_max: int = 4

    # energy: <=2 critical, 3-4 high
    energy_critical_max: int = 2
    energy_high_max: int = 4

    sleep_hours_critical_max: float = 5.0
    sleep_quality_high_max: int = 3
    motivation_medium_max: int = 3
    focus_medium_max: int = 3

    soreness_high_min: int = 4

    # illness: >=4 critical, 2-3 high
    illness_high_min: int = 2
    illness_critical_min: int = 4

    def __post_init__(self) -> None:
        _check_order(
            self,
            [
                ("hydration_critical_max", "hydration_high_max"),
                ("energy_critical_max", "energy_high_max"),
                ("illness_high_min", "illness_critical_min"),
            ],
        )


def describe(table: object) -> dict[str, float]:
    """Flatten a threshold table into a plain dict (for logging and CLI output)."""
    return {f.name: getattr(table, f.name) for f in fields(table)}  # type: ignore[arg-type]
