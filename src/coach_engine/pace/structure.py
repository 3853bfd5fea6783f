"""Workout structure normalization.

A workout's interval structure arrives as free-form JSON authored by
coaches, so several encodings are tolerated:

    REP_LIST     [{"repNumber": 1, "distance": 800}, {"distance": 800}]
    REPS_OBJECT  {"reps": [{"repNumber": 1, "distance": 800}, ...]}
    SHORTHAND    {"reps": 6, "distance": 800}
    SETS         {"sets": [{"reps": 3, "distance": 400}, {"reps": 2, "distance": 800}]}

Shapes are detected by field presence and type, in that order, and decoded
into one flat list of Rep. Nothing here raises: unusable entries are
dropped and unrecognised payloads decode to an empty list.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from coach_engine.models.enums import StructureShape
from coach_engine.models.pace import Rep

logger = logging.getLogger(__name__)


def _finite_number(value: Any) -> float | None:
    """Return ``value`` if it is a finite real number (bools excluded).

    JSON integers too large for a float count as unusable.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        finite = math.isfinite(value)
    except OverflowError:
        return None
    if not finite:
        return None
    return value


def _positive_number(value: Any) -> float | None:
    number = _finite_number(value)
    if number is None or number <= 0:
        return None
    return number


def detect_shape(structure: Any) -> StructureShape:
    """Classify a raw structure payload by field presence and type."""
    if isinstance(structure, (list, tuple)):
        return StructureShape.REP_LIST
    if not isinstance(structure, Mapping):
        return StructureShape.UNKNOWN

    reps = structure.get("reps")
    if isinstance(reps, (list, tuple)):
        return StructureShape.REPS_OBJECT
    if _positive_number(reps) is not None and _positive_number(structure.get("distance")) is not None:
        return StructureShape.SHORTHAND
    if isinstance(structure.get("sets"), (list, tuple)):
        return StructureShape.SETS
    return StructureShape.UNKNOWN


def _decode_rep_list(entries: list | tuple) -> list[Rep]:
    """Keep entries with a usable distance; number the rest by position."""
    reps: list[Rep] = []
    position = 1
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        distance = _positive_number(entry.get("distance"))
        if distance is None:
            logger.debug("Skipping rep without usable distance: %r", entry)
            continue
        rep_number = _finite_number(entry.get("repNumber"))
        reps.append(Rep(rep_number=position if rep_number is None else rep_number, distance=distance))
        position += 1
    return reps


def _decode_shorthand(structure: Mapping) -> list[Rep]:
    count = math.floor(structure["reps"])
    distance = structure["distance"]
    return [Rep(rep_number=n, distance=distance) for n in range(1, count + 1)]


def _decode_sets(sets: list | tuple) -> list[Rep]:
    """Expand each set into its reps, numbering straight through all sets."""
    reps: list[Rep] = []
    rep_number = 1
    for entry in sets:
        if not isinstance(entry, Mapping):
            continue
        distance = _positive_number(entry.get("distance"))
        if distance is None:
            logger.debug("Skipping set without usable distance: %r", entry)
            continue
        count = _positive_number(entry.get("reps"))
        for _ in range(1 if count is None else math.floor(count)):
            reps.append(Rep(rep_number=rep_number, distance=distance))
            rep_number += 1
    return reps


def normalize_structure(structure: Any) -> list[Rep]:
    """Decode any supported structure encoding into an ordered list of reps.

    Args:
        structure: Raw structure payload (list, mapping, None, anything).

    Returns:
        Reps in workout order, or an empty list if nothing usable was found.
    """
    shape = detect_shape(structure)
    logger.debug("Workout structure shape: %s", shape.name)

    if shape == StructureShape.REP_LIST:
        return _decode_rep_list(structure)
    if shape == StructureShape.REPS_OBJECT:
        return _decode_rep_list(structure["reps"])
    if shape == StructureShape.SHORTHAND:
        return _decode_shorthand(structure)
    if shape == StructureShape.SETS:
        return _decode_sets(structure["sets"])
    return []
