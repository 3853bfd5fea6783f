"""Coaching engine CLI: evaluate check-ins and compute rep targets from JSON.

Usage:
    python -m coach_cli.main alerts --input checkin.json --athlete "Jordan Lee" --prior 12
    python -m coach_cli.main paces --baseline 300 --structure '{"reps": 4, "distance": 400}'
    python -m coach_cli.main rules --rule-set banded
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from coach_engine.engine import AlertEngine
from coach_engine.exceptions import CoachEngineError, WellnessValidationError
from coach_engine.pace.calculator import calculate_personalized_target_paces
from coach_engine.registry import AlertRuleRegistry, discover_rule_sets
from coach_engine.reporting import (
    requires_notification,
    severity_counts,
    sort_for_display,
)
from coach_engine.rules.thresholds import describe
from coach_engine.serialization import (
    alerts_to_payload,
    target_paces_to_payload,
    to_json_string,
)
from coach_engine.validation import validate_wellness_input

from coach_cli.config import ALERT_RULE_SET, JSON_INDENT, LOG_LEVEL

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _read_json(path: str) -> Any:
    """Load JSON from a file path, or from stdin when path is "-"."""
    if path == "-":
        return json.load(sys.stdin)
    with open(path) as f:
        return json.load(f)


def _emit(payload: Any) -> None:
    print(to_json_string(payload, indent=JSON_INDENT))


def run_alerts(args: argparse.Namespace) -> int:
    """Validate a check-in body and print the alerts it triggers."""
    body = _read_json(args.input)
    checkin = validate_wellness_input(body)

    engine = AlertEngine(AlertRuleRegistry.from_rule_set(args.rule_set))
    alerts, trace = engine.evaluate_with_trace(
        checkin.submission, args.athlete, args.prior
    )
    logger.info(
        "Rule set %s: %d of %d rules fired for %s",
        trace.rule_set,
        len(alerts),
        len(trace.rule_results),
        args.athlete,
    )

    if args.display_order:
        alerts = sort_for_display(alerts)

    _emit(
        {
            "alerts": alerts_to_payload(alerts),
            "counts": {s.label: n for s, n in severity_counts(alerts).items()},
            "notifyCoach": requires_notification(alerts),
        }
    )
    return EXIT_OK


def run_paces(args: argparse.Namespace) -> int:
    """Print per-rep target times for a workout structure."""
    structure = json.loads(args.structure)
    targets = calculate_personalized_target_paces(
        args.baseline, structure, args.target_pace
    )
    if not targets:
        logger.warning("No target paces produced (missing baseline or no usable reps)")
    _emit(target_paces_to_payload(targets))
    return EXIT_OK


def run_rules(args: argparse.Namespace) -> int:
    """Print the rules and default thresholds of a rule set."""
    registry = AlertRuleRegistry.from_rule_set(args.rule_set)
    module = discover_rule_sets()[args.rule_set]
    _emit(
        {
            "ruleSet": registry.rule_set,
            "rules": [
                {"ruleId": rule.rule_id, "severity": rule.severity.label}
                for rule in registry.get_all_rules()
            ],
            "thresholds": describe(module.THRESHOLDS()),
        }
    )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Coaching engine: wellness alerts and rep targets")
    sub = parser.add_subparsers(dest="command", required=True)

    alerts = sub.add_parser("alerts", help="Evaluate a wellness check-in")
    alerts.add_argument("--input", default="-", help="Check-in JSON file ('-' for stdin)")
    alerts.add_argument("--athlete", required=True, help="Athlete name for alert messages")
    alerts.add_argument(
        "--prior", type=int, default=1, help="Number of earlier check-ins on record"
    )
    alerts.add_argument("--rule-set", default=ALERT_RULE_SET, help="Alert rule set name")
    alerts.add_argument(
        "--display-order",
        action="store_true",
        help="Sort alerts by severity instead of rule order",
    )
    alerts.set_defaults(handler=run_alerts)

    paces = sub.add_parser("paces", help="Compute personalized rep targets")
    paces.add_argument("--baseline", type=float, default=None, help="1600m time in seconds")
    paces.add_argument("--structure", required=True, help="Workout structure as JSON")
    paces.add_argument(
        "--target-pace", type=float, default=None, help="Workout target pace (s per 1600m)"
    )
    paces.set_defaults(handler=run_paces)

    rules = sub.add_parser("rules", help="List the rules in a rule set")
    rules.add_argument("--rule-set", default=ALERT_RULE_SET, help="Alert rule set name")
    rules.set_defaults(handler=run_rules)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        return args.handler(args)
    except json.JSONDecodeError as exc:
        logger.error("Input is not valid JSON: %s", exc)
        return EXIT_INVALID_INPUT
    except WellnessValidationError as exc:
        logger.error("Check-in failed validation")
        print(to_json_string({"errors": exc.errors}, indent=JSON_INDENT), file=sys.stderr)
        return EXIT_INVALID_INPUT
    except CoachEngineError as exc:
        logger.error("%s", exc)
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
