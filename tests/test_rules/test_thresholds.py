"""Tests for threshold tables."""

from __future__ import annotations

import dataclasses

import pytest

from coach_engine.exceptions import RuleConfigurationError
from coach_engine.rules.thresholds import BandedThresholds, StandardThresholds, describe


class TestThresholdTables:
    def test_standard_defaults(self) -> None:
        t = StandardThresholds()
        assert t.hydration_critical_max == 3
        assert t.hydration_high_max == 5
        assert t.sleep_hours_critical_max == 4.0
        assert t.compound_energy_max == 4

    def test_tables_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            StandardThresholds().hydration_high_max = 7  # type: ignore[misc]

    def test_inverted_band_rejected(self) -> None:
        with pytest.raises(RuleConfigurationError, match="hydration_critical_max"):
            StandardThresholds(hydration_critical_max=6)

    def test_zero_count_threshold_rejected(self) -> None:
        with pytest.raises(RuleConfigurationError):
            StandardThresholds(soreness_high_min=0)

    def test_banded_illness_order_checked(self) -> None:
        with pytest.raises(RuleConfigurationError):
            BandedThresholds(illness_high_min=5)

    def test_describe_flattens_table(self) -> None:
        flat = describe(BandedThresholds())
        assert flat["hydration_critical_max"] == 2
        assert flat["illness_critical_min"] == 4
        assert len(flat) == len(dataclasses.fields(BandedThresholds))
