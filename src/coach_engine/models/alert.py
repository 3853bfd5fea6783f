"""Alert output: what a single fired wellness rule reports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from coach_engine.models.enums import AlertSeverity


@dataclass(frozen=True)
class AlertResult:
    """One triggered alert for a coach.

    ``rule_id`` is stable across releases and is used downstream for
    deduplication and analytics. ``details`` holds the metric value(s) and
    threshold(s) that fired, wrapped read-only.
    """

    rule_id: str
    severity: AlertSeverity
    message: str
    details: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    @property
    def is_critical(self) -> bool:
        return self.severity == AlertSeverity.CRITICAL
