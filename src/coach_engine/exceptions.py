"""Custom exception hierarchy for the coaching engine."""

from __future__ import annotations


class CoachEngineError(Exception):
    """Base exception for all coach_engine errors."""


class WellnessValidationError(CoachEngineError):
    """A raw check-in payload failed field validation.

    ``errors`` holds one human-readable message per failing field.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__(" ".join(errors))
        self.errors = list(errors)


class RuleConfigurationError(CoachEngineError):
    """An alert rule table could not be assembled."""


class DuplicateRuleError(RuleConfigurationError):
    """Two rules in one registry share a rule_id."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Alert rule {rule_id!r} is already registered")
        self.rule_id = rule_id


class UnknownRuleSetError(RuleConfigurationError):
    """No rule-set module declares the requested name."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown alert rule set {name!r}; available: {', '.join(available) or 'none'}"
        )
        self.name = name


class InvalidSeverityError(CoachEngineError):
    """A severity filter was not one of critical, high, medium, low."""
