"""Alert rule definition shared by every rule table."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from coach_engine.models.alert import AlertResult
from coach_engine.models.enums import AlertSeverity
from coach_engine.models.wellness import WellnessSubmission

Predicate = Callable[[WellnessSubmission, int], bool]
MessageTemplate = Callable[[WellnessSubmission, str], str]
DetailsExtractor = Callable[[WellnessSubmission], Mapping[str, Any]]


@dataclass(frozen=True)
class AlertRule:
    """One declarative wellness alert rule.

    Each rule encapsulates a single threshold check. Rules never look at
    each other: the AlertEngine checks every registered rule on every
    submission, so one check-in can fire several alerts at once.

    Attributes:
        rule_id: stable identifier (e.g. "hydration_critical").
        severity: AlertSeverity tier reported when the rule fires.
        predicate: ``(submission, prior_submission_count) -> bool``.
        message: ``(submission, athlete_name) -> str``.
        details: ``(submission) -> mapping`` of the values that fired.
    """

    rule_id: str
    severity: AlertSeverity
    predicate: Predicate
    message: MessageTemplate
    details: DetailsExtractor

    def evaluate(
        self,
        submission: WellnessSubmission,
        athlete_name: str,
        prior_submission_count: int,
    ) -> AlertResult | None:
        """Return an AlertResult if the rule fires, otherwise None."""
        if not self.predicate(submission, prior_submission_count):
            return None
        return AlertResult(
            rule_id=self.rule_id,
            severity=self.severity,
            message=self.message(submission, athlete_name),
            details=self.details(submission),
        )
