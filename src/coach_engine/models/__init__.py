"""Data models for the coaching engine."""

from coach_engine.models.alert import AlertResult
from coach_engine.models.decision_trace import AlertTrace, RuleResult, RuleStatus
from coach_engine.models.enums import (
    AlertSeverity,
    FoodTiming,
    IllnessSymptom,
    SorenessArea,
    StructureShape,
)
from coach_engine.models.pace import Rep, SplitComparison, TargetPace
from coach_engine.models.rpe import ValidatedRpe
from coach_engine.models.wellness import ValidatedCheckIn, WellnessSubmission

__all__ = [
    "AlertResult",
    "AlertSeverity",
    "AlertTrace",
    "FoodTiming",
    "IllnessSymptom",
    "Rep",
    "RuleResult",
    "RuleStatus",
    "SorenessArea",
    "SplitComparison",
    "StructureShape",
    "TargetPace",
    "ValidatedCheckIn",
    "ValidatedRpe",
    "WellnessSubmission",
]
