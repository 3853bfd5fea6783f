"""camelCase payload rendering for alerts and target paces.

Converts internal frozen models into JSON-ready dicts matching the mobile
API's field names. All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from coach_engine.models.alert import AlertResult
from coach_engine.models.pace import SplitComparison, TargetPace


def _camel(name: str) -> str:
    """snake_case -> camelCase, e.g. "sleep_hours" -> "sleepHours"."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _camel_keys(mapping: Mapping[str, Any]) -> dict[str, Any]:
    return {_camel(key): value for key, value in mapping.items()}


def _number(value: float) -> float | int:
    """Render whole floats as ints (800.0 -> 800)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def alert_to_payload(alert: AlertResult) -> dict[str, Any]:
    """Convert an AlertResult to its API/storage representation."""
    return {
        "ruleId": alert.rule_id,
        "severity": alert.severity.label,
        "message": alert.message,
        "details": _camel_keys(alert.details),
    }


def alerts_to_payload(alerts: Iterable[AlertResult]) -> list[dict[str, Any]]:
    return [alert_to_payload(alert) for alert in alerts]


def target_pace_to_payload(target: TargetPace) -> dict[str, Any]:
    return {
        "repNumber": _number(target.rep_number),
        "distance": _number(target.distance),
        "paceReference": _number(target.pace_reference),
        "targetTime": target.target_time,
    }


def target_paces_to_payload(targets: Iterable[TargetPace]) -> list[dict[str, Any]]:
    return [target_pace_to_payload(target) for target in targets]


def split_comparison_to_payload(split: SplitComparison) -> dict[str, Any]:
    return {
        "repNumber": _number(split.rep_number),
        "time": split.time,
        "target": split.target,
        "deviation": split.deviation,
    }


def to_json_string(payload: Any, indent: int | None = 2) -> str:
    """Serialize a rendered payload to a JSON string."""
    return json.dumps(payload, indent=indent)
