"""AlertEngine: evaluates a wellness submission against every alert rule."""

from __future__ import annotations

import logging

from coach_engine.models.alert import AlertResult
from coach_engine.models.decision_trace import AlertTrace, RuleResult, RuleStatus
from coach_engine.models.wellness import WellnessSubmission
from coach_engine.registry import DEFAULT_RULE_SET, AlertRuleRegistry

logger = logging.getLogger(__name__)


class AlertEngine:
    """Runs a fixed, ordered rule table over one check-in at a time.

    Every rule is checked on every call; there is no short-circuiting, so a
    single submission can produce several alerts at different severities.
    Alerts come back in rule-table order. The engine keeps no state between
    calls and is safe to share across threads.

    Usage:
        engine = AlertEngine()
        alerts = engine.evaluate(submission, "Jordan Lee", prior_submission_count=12)
        alerts, trace = engine.evaluate_with_trace(submission, "Jordan Lee", 12)
    """

    def __init__(self, registry: AlertRuleRegistry | None = None) -> None:
        self.registry = registry or AlertRuleRegistry.from_rule_set(DEFAULT_RULE_SET)

    def evaluate(
        self,
        submission: WellnessSubmission,
        athlete_name: str,
        prior_submission_count: int,
    ) -> list[AlertResult]:
        """Return every alert the submission triggers.

        Args:
            submission: Validated wellness check-in.
            athlete_name: Full name interpolated into alert messages.
            prior_submission_count: Check-ins on record before this one
                (0 means this is the athlete's first).

        Returns:
            Triggered alerts in rule-table order (empty if nothing fired).
        """
        alerts, _ = self.evaluate_with_trace(submission, athlete_name, prior_submission_count)
        return alerts

    def evaluate_with_trace(
        self,
        submission: WellnessSubmission,
        athlete_name: str,
        prior_submission_count: int,
    ) -> tuple[list[AlertResult], AlertTrace]:
        """Evaluate all rules and record each rule's outcome."""
        alerts: list[AlertResult] = []
        rule_results: list[RuleResult] = []

        for rule in self.registry.get_all_rules():
            alert = rule.evaluate(submission, athlete_name, prior_submission_count)
            if alert is not None:
                logger.debug("Rule %s fired (%s)", rule.rule_id, alert.severity.label)
                alerts.append(alert)
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.FIRED,
                        severity=rule.severity,
                        alert=alert,
                    )
                )
            else:
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.SKIPPED,
                        severity=rule.severity,
                    )
                )

        trace = AlertTrace(rule_results=tuple(rule_results), rule_set=self.registry.rule_set)
        return alerts, trace


def evaluate_wellness_alerts(
    submission: WellnessSubmission,
    athlete_name: str,
    prior_submission_count: int,
    engine: AlertEngine | None = None,
) -> list[AlertResult]:
    """Evaluate a check-in with the standard rule set (or the given engine)."""
    return (engine or AlertEngine()).evaluate(submission, athlete_name, prior_submission_count)
