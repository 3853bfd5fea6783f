"""Standard wellness alert rule set.

Eighteen independent rules over the nine check-in metrics, grouped by
severity. Within a metric the bands are disjoint (e.g. hydration <=3 is
critical, 4-5 is high), but rules on different metrics freely overlap:
compound_critical can fire alongside energy_critical and
sleep_hours_critical for the same submission.

| rule_id              | severity | fires when (defaults)            |
|----------------------|----------|----------------------------------|
| food_critical        | critical | food timing == havent_eaten      |
| hydration_critical   | critical | hydration <= 3                   |
| energy_critical      | critical | energy <= 3                      |
| sleep_hours_critical | critical | sleep hours <= 4.0               |
| illness_critical     | critical | >= 3 symptoms                    |
| compound_critical    | critical | energy <= 4 and sleep <= 5.0     |
| soreness_high        | high     | >= 3 sore areas                  |
| hydration_high       | high     | hydration 4-5                    |
| sleep_quality_high   | high     | sleep quality <= 4               |
| illness_high         | high     | 1-2 symptoms                     |
| sleep_hours_high     | high     | 4.0 < sleep hours <= 5.0         |
| motivation_medium    | medium   | motivation <= 4                  |
| focus_medium         | medium   | focus <= 4                       |
| food_timing_medium   | medium   | food timing == just_ate          |
| sleep_quality_medium | medium   | sleep quality 5-6                |
| soreness_low         | low      | 1-2 sore areas                   |
| energy_low           | low      | energy 4-5                       |
| first_submission     | low      | no prior check-ins               |
"""

from __future__ import annotations

from coach_engine.models.enums import AlertSeverity, FoodTiming
from coach_engine.models.wellness import WellnessSubmission
from coach_engine.rules.base import AlertRule
from coach_engine.rules.thresholds import StandardThresholds

RULE_SET_NAME = "standard"
THRESHOLDS = StandardThresholds


def _tags(values: tuple) -> list[str]:
    return [v.value for v in values]


def _joined(values: tuple) -> str:
    return ", ".join(_tags(values))


def _soreness_details(s: WellnessSubmission, threshold: int | str) -> dict:
    return {
        "soreness_area_count": s.soreness_count,
        "soreness_areas": _tags(s.soreness_areas),
        "threshold": threshold,
    }


def _illness_details(s: WellnessSubmission, threshold: int | str) -> dict:
    return {
        "illness_symptom_count": s.illness_count,
        "illness_symptoms": _tags(s.illness_symptoms),
        "threshold": threshold,
    }


def build_rules(thresholds: StandardThresholds | None = None) -> list[AlertRule]:
    """Build the standard rule table from a threshold table.

    Args:
        thresholds: Threshold overrides. Defaults to StandardThresholds().

    Returns:
        Rules in evaluation order: critical, high, medium, low.
    """
    t = thresholds or StandardThresholds()

    hydration_band = f"{t.hydration_critical_max + 1}-{t.hydration_high_max}"
    energy_band = f"{t.energy_critical_max + 1}-{t.energy_low_max}"
    sleep_hours_band = f"{t.sleep_hours_critical_max + 0.1:.1f}-{t.sleep_hours_high_max:.1f}"
    sleep_quality_band = f"{t.sleep_quality_high_max + 1}-{t.sleep_quality_medium_max}"
    illness_band = f"1-{t.illness_critical_min - 1}"
    soreness_band = f"1-{t.soreness_high_min - 1}"

    return [
        # --- CRITICAL ---
        AlertRule(
            rule_id="food_critical",
            severity=AlertSeverity.CRITICAL,
            predicate=lambda s, _: s.food_timing == FoodTiming.HAVENT_EATEN,
            message=lambda s, name: f"{name} hasn't eaten before practice",
            details=lambda s: {"food_timing": s.food_timing.value},
        ),
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
            message=lambda s, name: (
                f"{name} reports {s.illness_count} illness symptoms: "
                f"{_joined(s.illness_symptoms)}"
            ),
            details=lambda s: _illness_details(s, t.illness_critical_min),
        ),
        AlertRule(
            rule_id="compound_critical",
            severity=AlertSeverity.CRITICAL,
            predicate=lambda s, _: (
                s.energy <= t.compound_energy_max
                and s.sleep_hours <= t.compound_sleep_hours_max
            ),
            message=lambda s, name: (
                f"{name} has low energy AND poor sleep, possible overtraining"
            ),
            details=lambda s: {
                "energy": s.energy,
                "energy_threshold": t.compound_energy_max,
                "sleep_hours": s.sleep_hours,
                "sleep_hours_threshold": t.compound_sleep_hours_max,
            },
        ),
        # --- HIGH ---
        AlertRule(
            rule_id="soreness_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: s.soreness_count >= t.soreness_high_min,
            message=lambda s, name: (
                f"{name} reports soreness in {s.soreness_count} areas: "
                f"{_joined(s.soreness_areas)}"
            ),
            details=lambda s: _soreness_details(s, t.soreness_high_min),
        ),
        AlertRule(
            rule_id="hydration_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: (
                t.hydration_critical_max < s.hydration <= t.hydration_high_max
            ),
            message=lambda s, name: (
                f"{name} reports below-average hydration ({s.hydration}/10)"
            ),
            details=lambda s: {"hydration": s.hydration, "threshold": hydration_band},
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
            rule_id="illness_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: 1 <= s.illness_count < t.illness_critical_min,
            message=lambda s, name: (
                f"{name} reports illness symptoms: {_joined(s.illness_symptoms)}"
            ),
            details=lambda s: _illness_details(s, illness_band),
        ),
        AlertRule(
            rule_id="sleep_hours_high",
            severity=AlertSeverity.HIGH,
            predicate=lambda s, _: (
                t.sleep_hours_critical_max < s.sleep_hours <= t.sleep_hours_high_max
            ),
            message=lambda s, name: f"{name} got only {s.sleep_hours} hours of sleep",
            details=lambda s: {"sleep_hours": s.sleep_hours, "threshold": sleep_hours_band},
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
        AlertRule(
            rule_id="food_timing_medium",
            severity=AlertSeverity.MEDIUM,
            predicate=lambda s, _: s.food_timing == FoodTiming.JUST_ATE,
            message=lambda s, name: f"{name} just ate before practice",
            details=lambda s: {"food_timing": s.food_timing.value},
        ),
        AlertRule(
            rule_id="sleep_quality_medium",
            severity=AlertSeverity.MEDIUM,
            predicate=lambda s, _: (
                t.sleep_quality_high_max < s.sleep_quality <= t.sleep_quality_medium_max
            ),
            message=lambda s, name: (
                f"{name} reports average sleep quality ({s.sleep_quality}/10)"
            ),
            details=lambda s: {
                "sleep_quality": s.sleep_quality,
                "threshold": sleep_quality_band,
            },
        ),
        # --- LOW ---
        AlertRule(
            rule_id="soreness_low",
            severity=AlertSeverity.LOW,
            predicate=lambda s, _: 1 <= s.soreness_count < t.soreness_high_min,
            message=lambda s, name: (
                f"{name} reports minor soreness: {_joined(s.soreness_areas)}"
            ),
            details=lambda s: _soreness_details(s, soreness_band),
        ),
        AlertRule(
            rule_id="energy_low",
            severity=AlertSeverity.LOW,
            predicate=lambda s, _: t.energy_critical_max < s.energy <= t.energy_low_max,
            message=lambda s, name: (
                f"{name} reports below-average energy ({s.energy}/10)"
            ),
            details=lambda s: {"energy": s.energy, "threshold": energy_band},
        ),
        AlertRule(
            rule_id="first_submission",
            severity=AlertSeverity.LOW,
            predicate=lambda s, prior_count: prior_count == 0,
            message=lambda s, name: f"First wellness check-in from {name}",
            details=lambda s: {"prior_submission_count": 0},
        ),
    ]
