"""Tests for the command-line entry point."""

from __future__ import annotations

import json

from coach_cli.main import EXIT_INVALID_INPUT, EXIT_OK, main


def _write_checkin(tmp_path, **overrides) -> str:
    body = {
        "sleepHours": 4.0,
        "sleepQuality": 8,
        "hydration": 2,
        "energy": 2,
        "motivation": 8,
        "focus": 8,
        "foodTiming": "3_plus_hours",
        "sorenessAreas": [],
        "illnessSymptoms": [],
    }
    body.update(overrides)
    path = tmp_path / "checkin.json"
    path.write_text(json.dumps(body))
    return str(path)


class TestAlertsCommand:
    def test_prints_alerts_and_counts(self, tmp_path, capsys) -> None:
        path = _write_checkin(tmp_path)
        code = main(["alerts", "--input", path, "--athlete", "Jordan Lee", "--prior", "4"])
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert [a["ruleId"] for a in out["alerts"]] == [
            "hydration_critical",
            "energy_critical",
            "sleep_hours_critical",
            "compound_critical",
        ]
        assert out["counts"] == {"critical": 4, "high": 0, "medium": 0, "low": 0}
        assert out["notifyCoach"] is True

    def test_display_order(self, tmp_path, capsys) -> None:
        path = _write_checkin(tmp_path, sleepHours=8.0, hydration=9, energy=9, motivation=2)
        main(["alerts", "--input", path, "--athlete", "Jordan Lee", "--prior", "0", "--display-order"])
        out = json.loads(capsys.readouterr().out)
        assert [a["severity"] for a in out["alerts"]] == ["medium", "low"]
        assert out["notifyCoach"] is False

    def test_banded_rule_set(self, tmp_path, capsys) -> None:
        path = _write_checkin(tmp_path)
        main(["alerts", "--input", path, "--athlete", "Jordan Lee", "--rule-set", "banded"])
        out = json.loads(capsys.readouterr().out)
        assert "compound_critical" not in [a["ruleId"] for a in out["alerts"]]

    def test_validation_error_exit_code(self, tmp_path, capsys) -> None:
        path = _write_checkin(tmp_path, hydration=42)
        code = main(["alerts", "--input", path, "--athlete", "Jordan Lee"])
        err = json.loads(capsys.readouterr().err)
        assert code == EXIT_INVALID_INPUT
        assert err["errors"] == ["hydration must be an integer between 1 and 10."]

    def test_oversized_number_is_a_validation_error(self, tmp_path, capsys) -> None:
        path = _write_checkin(tmp_path)
        with open(path) as f:
            text = f.read().replace('"sleepHours": 4.0', '"sleepHours": 1' + "0" * 400)
        with open(path, "w") as f:
            f.write(text)
        code = main(["alerts", "--input", path, "--athlete", "Jordan Lee"])
        err = json.loads(capsys.readouterr().err)
        assert code == EXIT_INVALID_INPUT
        assert err["errors"][0].startswith("sleepHours must be a number")

    def test_unknown_rule_set_exit_code(self, tmp_path) -> None:
        path = _write_checkin(tmp_path)
        code = main(["alerts", "--input", path, "--athlete", "Jordan Lee", "--rule-set", "nope"])
        assert code == EXIT_INVALID_INPUT


class TestPacesCommand:
    def test_shorthand(self, capsys) -> None:
        code = main(["paces", "--baseline", "300", "--structure", '{"reps": 4, "distance": 400}'])
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert [p["targetTime"] for p in out] == [75, 75, 75, 75]
        assert out[0] == {"repNumber": 1, "distance": 400, "paceReference": 300, "targetTime": 75}

    def test_missing_baseline_prints_empty_list(self, capsys) -> None:
        main(["paces", "--structure", '{"reps": 4, "distance": 400}'])
        assert json.loads(capsys.readouterr().out) == []

    def test_invalid_json_structure(self) -> None:
        assert main(["paces", "--baseline", "300", "--structure", "{reps: 4"]) == EXIT_INVALID_INPUT


class TestRulesCommand:
    def test_lists_banded_rules(self, capsys) -> None:
        main(["rules", "--rule-set", "banded"])
        out = json.loads(capsys.readouterr().out)
        assert out["ruleSet"] == "banded"
        assert len(out["rules"]) == 11
        assert out["thresholds"]["hydration_critical_max"] == 2
