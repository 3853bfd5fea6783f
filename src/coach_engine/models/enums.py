"""Enumerations and constants for the coaching engine.

Wellness metric domains mirror the athlete check-in form; alert thresholds
live in ``coach_engine.rules.thresholds`` so they can be swapped per team.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class AlertSeverity(IntEnum):
    """Alert severity tiers. Lower value = more urgent.

    The integer value doubles as the display rank.
    """

    CRITICAL = 0
    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @property
    def label(self) -> str:
        """Lower-case wire name, e.g. ``"critical"``."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> AlertSeverity:
        return cls[label.upper()]


class FoodTiming(str, Enum):
    """When the athlete last ate relative to practice."""

    HAVENT_EATEN = "havent_eaten"
    JUST_ATE = "just_ate"
    ONE_TO_TWO_HOURS = "1_2_hours"
    THREE_PLUS_HOURS = "3_plus_hours"


class SorenessArea(str, Enum):
    """Body areas an athlete can flag as sore."""

    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    CALVES = "calves"
    SHINS = "shins"
    KNEES = "knees"
    ANKLES = "ankles"
    FEET = "feet"
    HIPS = "hips"
    LOWER_BACK = "lower_back"
    UPPER_BACK = "upper_back"
    SHOULDERS = "shoulders"
    NECK = "neck"


class IllnessSymptom(str, Enum):
    """Illness symptoms an athlete can report."""

    HEADACHE = "headache"
    SORE_THROAT = "sore_throat"
    CONGESTION = "congestion"
    COUGH = "cough"
    NAUSEA = "nausea"
    FEVER = "fever"
    FATIGUE = "fatigue"
    BODY_ACHES = "body_aches"
    DIZZINESS = "dizziness"


class StructureShape(IntEnum):
    """Recognised encodings of a workout's interval structure."""

    REP_LIST = 1      # [{"repNumber": 1, "distance": 800}, ...]
    REPS_OBJECT = 2   # {"reps": [{...}, ...]}
    SHORTHAND = 3     # {"reps": 6, "distance": 800}
    SETS = 4          # {"sets": [{"reps": 3, "distance": 400}, ...]}
    UNKNOWN = 5


# ---------------------------------------------------------------------------
# Check-in field domains
# ---------------------------------------------------------------------------
SLEEP_HOURS_MIN = 4.0
SLEEP_HOURS_MAX = 12.0
SLEEP_HOURS_STEP = 0.5

SCORE_MIN = 1
SCORE_MAX = 10

NOTES_MAX_CHARS = 1000
SORENESS_NOTES_MAX_CHARS = 500
ILLNESS_NOTES_MAX_CHARS = 500
RPE_NOTES_MAX_CHARS = 500

# ---------------------------------------------------------------------------
# Pace constants
# ---------------------------------------------------------------------------
# Baseline test distance; every rep target scales from the athlete's 1600m time
REFERENCE_DISTANCE_M = 1600.0

# ---------------------------------------------------------------------------
# Alert feed paging
# ---------------------------------------------------------------------------
FEED_DEFAULT_LIMIT = 20
FEED_MAX_LIMIT = 100
