"""Tests for AlertRuleRegistry and rule-set discovery."""

from __future__ import annotations

import pytest

from coach_engine.exceptions import (
    DuplicateRuleError,
    RuleConfigurationError,
    UnknownRuleSetError,
)
from coach_engine.models.enums import AlertSeverity
from coach_engine.registry import AlertRuleRegistry, discover_rule_sets
from coach_engine.rules.base import AlertRule
from coach_engine.rules.thresholds import BandedThresholds, StandardThresholds


def _dummy_rule(rule_id: str) -> AlertRule:
    return AlertRule(
        rule_id=rule_id,
        severity=AlertSeverity.LOW,
        predicate=lambda s, _: False,
        message=lambda s, name: "",
        details=lambda s: {},
    )


class TestRuleSetDiscovery:
    def test_discovers_both_rule_sets(self) -> None:
        assert list(discover_rule_sets()) == ["banded", "standard"]

    def test_helper_modules_are_not_rule_sets(self) -> None:
        found = discover_rule_sets()
        assert "base" not in found
        assert "thresholds" not in found


class TestAlertRuleRegistry:
    def test_standard_rule_order(self) -> None:
        registry = AlertRuleRegistry.from_rule_set("standard")
        ids = registry.rule_ids
        assert ids[0] == "food_critical"
        assert ids[-1] == "first_submission"
        assert len(registry) == 18

    def test_banded_rule_count(self) -> None:
        assert len(AlertRuleRegistry.from_rule_set("banded")) == 11

    def test_unknown_rule_set(self) -> None:
        with pytest.raises(UnknownRuleSetError, match="available: banded, standard"):
            AlertRuleRegistry.from_rule_set("experimental")

    def test_mismatched_thresholds_rejected(self) -> None:
        with pytest.raises(RuleConfigurationError, match="expects BandedThresholds"):
            AlertRuleRegistry.from_rule_set("banded", StandardThresholds())

    def test_matching_thresholds_accepted(self) -> None:
        registry = AlertRuleRegistry.from_rule_set("banded", BandedThresholds(focus_medium_max=5))
        assert registry.rule_set == "banded"

    def test_register_and_get(self) -> None:
        registry = AlertRuleRegistry()
        registry.register(_dummy_rule("dummy_test"))
        assert registry.get("dummy_test") is not None
        assert registry.rule_set == "custom"

    def test_get_nonexistent_returns_none(self) -> None:
        assert AlertRuleRegistry().get("nonexistent_rule") is None

    def test_duplicate_rule_id_rejected(self) -> None:
        registry = AlertRuleRegistry([_dummy_rule("dup")])
        with pytest.raises(DuplicateRuleError) as excinfo:
            registry.register(_dummy_rule("dup"))
        assert excinfo.value.rule_id == "dup"

    def test_registration_order_preserved(self) -> None:
        registry = AlertRuleRegistry([_dummy_rule(x) for x in ("z", "a", "m")])
        assert [r.rule_id for r in registry.get_all_rules()] == ["z", "a", "m"]
