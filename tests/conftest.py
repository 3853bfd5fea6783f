"""Shared test fixtures: check-in submissions and alert engines."""

from __future__ import annotations

from typing import Callable

import pytest

from coach_engine.engine import AlertEngine
from coach_engine.models.enums import FoodTiming
from coach_engine.models.wellness import WellnessSubmission
from coach_engine.registry import AlertRuleRegistry


def make_submission(**overrides) -> WellnessSubmission:
    """A well-rested, well-fed athlete unless overridden."""
    defaults = dict(
        sleep_hours=8.0,
        sleep_quality=9,
        hydration=9,
        energy=9,
        motivation=9,
        focus=9,
        food_timing=FoodTiming.ONE_TO_TWO_HOURS,
        soreness_areas=(),
        illness_symptoms=(),
    )
    defaults.update(overrides)
    return WellnessSubmission(**defaults)


@pytest.fixture
def submission_factory() -> Callable[..., WellnessSubmission]:
    return make_submission


@pytest.fixture
def healthy_submission() -> WellnessSubmission:
    """Every metric at its healthiest extreme."""
    return make_submission(
        sleep_hours=12.0,
        sleep_quality=10,
        hydration=10,
        energy=10,
        motivation=10,
        focus=10,
        food_timing=FoodTiming.THREE_PLUS_HOURS,
    )


@pytest.fixture
def rough_morning() -> WellnessSubmission:
    """Dehydrated, exhausted and short on sleep."""
    return make_submission(hydration=2, energy=2, sleep_hours=4.0)


@pytest.fixture
def standard_engine() -> AlertEngine:
    return AlertEngine(AlertRuleRegistry.from_rule_set("standard"))


@pytest.fixture
def banded_engine() -> AlertEngine:
    return AlertEngine(AlertRuleRegistry.from_rule_set("banded"))
