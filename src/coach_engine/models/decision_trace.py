"""Alert trace: audit trail of every rule checked during one evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import auto, IntEnum

from coach_engine.models.alert import AlertResult
from coach_engine.models.enums import AlertSeverity


class RuleStatus(IntEnum):
    """Whether a rule fired or was checked and stayed quiet."""

    FIRED = auto()
    SKIPPED = auto()


@dataclass(frozen=True)
class RuleResult:
    """Record of a single rule's evaluation."""

    rule_id: str
    status: RuleStatus
    severity: AlertSeverity
    alert: AlertResult | None = None


@dataclass(frozen=True)
class AlertTrace:
    """Complete audit trail for a single AlertEngine.evaluate() call.

    Holds one RuleResult per registered rule in evaluation order, so a
    coach-facing "why didn't this fire?" question can always be answered.
    """

    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)
    rule_set: str = ""

    @property
    def fired_rule_ids(self) -> list[str]:
        return [r.rule_id for r in self.rule_results if r.status == RuleStatus.FIRED]
