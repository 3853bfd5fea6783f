"""Serialization module: render models as API payloads."""

from coach_engine.serialization.payloads import (
    alert_to_payload,
    alerts_to_payload,
    split_comparison_to_payload,
    target_pace_to_payload,
    target_paces_to_payload,
    to_json_string,
)

__all__ = [
    "alert_to_payload",
    "alerts_to_payload",
    "split_comparison_to_payload",
    "target_pace_to_payload",
    "target_paces_to_payload",
    "to_json_string",
]
