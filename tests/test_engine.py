"""Tests for AlertEngine: independence, ordering, determinism, trace."""

from __future__ import annotations

from coach_engine import evaluate_wellness_alerts
from coach_engine.engine import AlertEngine
from coach_engine.models.alert import AlertResult
from coach_engine.models.decision_trace import RuleStatus
from coach_engine.models.enums import AlertSeverity, FoodTiming, IllnessSymptom
from coach_engine.models.wellness import WellnessSubmission
from coach_engine.registry import AlertRuleRegistry
from coach_engine.reporting import severity_counts
from coach_engine.rules.base import AlertRule


class TestAlertEngine:
    def test_default_engine_uses_standard_rules(self) -> None:
        engine = AlertEngine()
        assert engine.registry.rule_set == "standard"
        assert len(engine.registry) == 18

    def test_returns_alert_results(self, standard_engine, rough_morning) -> None:
        alerts = standard_engine.evaluate(rough_morning, "Jordan Lee", 3)
        assert alerts
        assert all(isinstance(a, AlertResult) for a in alerts)

    def test_critical_subset_covers_hydration_and_sleep(self, standard_engine, rough_morning) -> None:
        alerts = standard_engine.evaluate(rough_morning, "Jordan Lee", 3)
        critical = {a.rule_id for a in alerts if a.severity == AlertSeverity.CRITICAL}
        assert {"hydration_critical", "sleep_hours_critical"} <= critical

    def test_deterministic(self, standard_engine, submission_factory) -> None:
        submission = submission_factory(
            hydration=4,
            energy=3,
            food_timing=FoodTiming.JUST_ATE,
            illness_symptoms=(IllnessSymptom.COUGH, IllnessSymptom.FEVER),
        )
        first = standard_engine.evaluate(submission, "Jordan Lee", 0)
        second = standard_engine.evaluate(submission, "Jordan Lee", 0)
        assert first == second

    def test_separate_engines_agree(self, rough_morning) -> None:
        a = AlertEngine().evaluate(rough_morning, "Jordan Lee", 2)
        b = AlertEngine().evaluate(rough_morning, "Jordan Lee", 2)
        assert a == b

    def test_healthy_extremes_fire_nothing(self, standard_engine, healthy_submission) -> None:
        assert standard_engine.evaluate(healthy_submission, "Jordan Lee", 10) == []

    def test_severity_counts_sum_to_length(self, standard_engine, submission_factory) -> None:
        submission = submission_factory(
            hydration=1, sleep_quality=5, motivation=3, energy=4, sleep_hours=4.5,
        )
        alerts = standard_engine.evaluate(submission, "Jordan Lee", 0)
        assert sum(severity_counts(alerts).values()) == len(alerts)

    def test_module_level_function(self, rough_morning) -> None:
        alerts = evaluate_wellness_alerts(rough_morning, "Jordan Lee", 3)
        assert "hydration_critical" in [a.rule_id for a in alerts]

    def test_module_level_function_accepts_engine(self, banded_engine, rough_morning) -> None:
        alerts = evaluate_wellness_alerts(rough_morning, "Jordan Lee", 3, engine=banded_engine)
        assert "compound_critical" not in [a.rule_id for a in alerts]


class TestAlertTrace:
    def test_trace_records_every_rule(self, standard_engine, rough_morning) -> None:
        alerts, trace = standard_engine.evaluate_with_trace(rough_morning, "Jordan Lee", 3)
        assert len(trace.rule_results) == 18
        assert trace.rule_set == "standard"
        assert trace.fired_rule_ids == [a.rule_id for a in alerts]

    def test_skipped_rules_have_no_alert(self, standard_engine, healthy_submission) -> None:
        _, trace = standard_engine.evaluate_with_trace(healthy_submission, "Jordan Lee", 3)
        assert all(r.status == RuleStatus.SKIPPED for r in trace.rule_results)
        assert all(r.alert is None for r in trace.rule_results)

    def test_trace_order_matches_registry(self, standard_engine, healthy_submission) -> None:
        _, trace = standard_engine.evaluate_with_trace(healthy_submission, "Jordan Lee", 3)
        assert [r.rule_id for r in trace.rule_results] == standard_engine.registry.rule_ids


class TestCustomRules:
    def test_custom_registry(self, submission_factory) -> None:
        rule = AlertRule(
            rule_id="late_night",
            severity=AlertSeverity.MEDIUM,
            predicate=lambda s, _: s.sleep_hours < 7.0,
            message=lambda s, name: f"{name} slept {s.sleep_hours}h",
            details=lambda s: {"sleep_hours": s.sleep_hours},
        )
        engine = AlertEngine(AlertRuleRegistry([rule]))
        alerts = engine.evaluate(submission_factory(sleep_hours=6.5), "Jordan Lee", 4)
        assert len(alerts) == 1
        assert alerts[0].message == "Jordan Lee slept 6.5h"
        assert engine.evaluate(submission_factory(), "Jordan Lee", 4) == []

    def test_every_rule_checked_even_after_one_fires(self) -> None:
        seen: list[str] = []

        def _recording(rule_id: str) -> AlertRule:
            def predicate(s: WellnessSubmission, prior: int) -> bool:
                seen.append(rule_id)
                return True

            return AlertRule(
                rule_id=rule_id,
                severity=AlertSeverity.CRITICAL,
                predicate=predicate,
                message=lambda s, name: rule_id,
                details=lambda s: {},
            )

        engine = AlertEngine(AlertRuleRegistry([_recording("a"), _recording("b"), _recording("c")]))
        submission = WellnessSubmission(
            sleep_hours=8.0, sleep_quality=8, hydration=8, energy=8,
            motivation=8, focus=8, food_timing=FoodTiming.JUST_ATE,
        )
        alerts = engine.evaluate(submission, "Jordan Lee", 1)
        assert seen == ["a", "b", "c"]
        assert [a.rule_id for a in alerts] == ["a", "b", "c"]
