"""Banded wellness alert rule set.

One non-overlapping band table per metric and nothing else: no food-timing,
compound or first-submission rules. Useful for teams that only want the
core readiness signals.

| rule_id              | severity | fires when (defaults) |
|----------------------|----------|-----------------------|
| hydration_critical   | critical | hydration <= 2        |
| energy_critical      | critical | energy <= 2           |
| sleep_hours_critical | critical | sleep hours <= 5.0    |
| illness_critical     | critical | >= 4 symptoms         |
| hydration_high       | high     | hydration 3-4         |
| energy_high          | high     | energy 3-4            |
| sleep_quality_high   | high     | sleep quality <= 3    |
| soreness_high        | high     | >= 4 sore areas       |
| illness_high         | high     | 2-3 symptoms          |
| motivation_medium    | medium   | motivation <= 3       |
| focus_medium         | medium   | focus <= 3            |
"""

from __future__ import annotations

from coach_engine.models.enums import AlertSeverity
from coach_engine.rules.base import AlertRule
from coach_engine.rules.thresholds import BandedThresholds

RULE_SET_NAME = "banded"
THRESHOLDS = BandedThresholds


def build_rules(thresholds: BandedThresholds | None = None) -> list[AlertRule]:
    """Build the banded rule table from a threshold table."""
    t = thresholds or BandedThresholds()

    hydration_band = f"{t.hydration_critical_max + 1}-{t.hydration_high_max}"
    energy_band = f"{t.energy_critical_max + 1}-{t.energy_high_max}"
    illness_band = f"{t.illness_high_min}-{t.illness_critical_min - 1}"

    return [
        # --- CRITICAL ---
        AlertRule(
            rule_id="hydration_critical",
            severity=AlertSeverity.CRITICAL,
            predicate=lambda s, _: s.hydration <= t.hydration_critical_max,
            message=lambda s, name: f"{name} reports very low hydration ({s.hydration}/10)",
            details=lambda s: {"hydration": s.hydration, "threshold": t.hydration_critical_max},
        ),
        AlertRule(
            rule_id="energy_critical",
            severity=AlertSeverity.CRITICAL,
            predicate=lambda s, _: s.energy <= t.energy_critical_max,
            message=lambda s, name: f"{name} reports very low energy ({s.energy}/10)",
            details=lambda s: {"energy": s.energy, "threshold": t.energy_critical_max},
        ),
        AlertRule(
            rule_id="sleep_hours_critical",
            severity=AlertSeverity.CRITICAL,
            predicate=lambda s, _: s.sleep_hours <= t.sleep_hours_critical_max,
            message=lambda s, name: f"{name} got only {s.sleep_hours} hours of sleep",
            details=lambda s: {
                "sleep_hours": s.sleep_hours,
                "threshold": t.sleep_hours_critical_max,
            },
        ),
        AlertRule(
            rule_id="illness_critical",
            severity=AlertSeverity.CRITICAL,
            predicate=lambda s, _: s.illness_count >= t.illness_critical_min,
            message=lambda s, name: f"{name} reports {s.illness_count} illness symptoms",
            details=lambda s: {
                "illness_symptom_count": s.illness_count,
                "threshold": t.illness_critical_min,
            },
        ),
        # --- HIGH ---
        AlertRule(
            rule_id="hydration_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: (
                t.hydration_critical_max < s.hydration <= t.hydration_high_max
            ),
            message=lambda s, name: f"{name} reports low hydration ({s.hydration}/10)",
            details=lambda s: {"hydration": s.hydration, "threshold": hydration_band},
        ),
        AlertRule(
            rule_id="energy_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: t.energy_critical_max < s.energy <= t.energy_high_max,
            message=lambda s, name: f"{name} reports low energy ({s.energy}/10)",
            details=lambda s: {"energy": s.energy, "threshold": energy_band},
        ),
        AlertRule(
            rule_id="sleep_quality_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: s.sleep_quality <= t.sleep_quality_high_max,
            message=lambda s, name: (
                f"{name} reports poor sleep quality ({s.sleep_quality}/10)"
            ),
            details=lambda s: {
                "sleep_quality": s.sleep_quality,
                "threshold": t.sleep_quality_high_max,
            },
        ),
        AlertRule(
            rule_id="soreness_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: s.soreness_count >= t.soreness_high_min,
            message=lambda s, name: f"{name} reports soreness in {s.soreness_count} areas",
            details=lambda s: {
                "soreness_area_count": s.soreness_count,
                "threshold": t.soreness_high_min,
            },
        ),
        AlertRule(
            rule_id="illness_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: (
                t.illness_high_min <= s.illness_count < t.illness_critical_min
            ),
            message=lambda s, name: f"{name} reports {s.illness_count} illness symptoms",
            details=lambda s: {
                "illness_symptom_count": s.illness_count,
                "threshold": illness_band,
            },
        ),
        # --- MEDIUM ---
        AlertRule(
            rule_id="motivation_medium",
            severity=AlertSeverity.MEDIUM,
            predicate=lambda s, _: s.motivation <= t.motivation_medium_max,
            message=lambda s, name: f"{name} reports low motivation ({s.motivation}/10)",
            details=lambda s: {
                "motivation": s.motivation,
                "threshold": t.motivation_medium_max,
            },
        ),
        AlertRule(
            rule_id="focus_medium",
            severity=AlertSeverity.MEDIUM,
            predicate=lambda s, _: s.focus <= t.focus_medium_max,
            message=lambda s, name: f"{name} reports low focus ({s.focus}/10)",
            details=lambda s: {"focus": s.focus, "threshold": t.focus_medium_max},
        ),
    ]
