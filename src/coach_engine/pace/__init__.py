"""Pace calculator: personalized per-rep targets from workout structures."""

from coach_engine.pace.calculator import (
    calculate_personalized_target_paces,
    pair_splits_with_targets,
)
from coach_engine.pace.structure import detect_shape, normalize_structure

__all__ = [
    "calculate_personalized_target_paces",
    "detect_shape",
    "normalize_structure",
    "pair_splits_with_targets",
]
