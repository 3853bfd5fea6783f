"""Coaching engine: wellness alert rules and personalized interval paces.

Both entry points are pure functions of their inputs:

    evaluate_wellness_alerts(submission, athlete_name, prior_submission_count)
    calculate_personalized_target_paces(baseline_1600m_s, structure, target_pace_s)
"""

from coach_engine.engine import AlertEngine, evaluate_wellness_alerts
from coach_engine.pace.calculator import calculate_personalized_target_paces

__all__ = [
    "AlertEngine",
    "calculate_personalized_target_paces",
    "evaluate_wellness_alerts",
]
