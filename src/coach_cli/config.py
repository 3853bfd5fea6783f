"""Environment-variable-based configuration for the command-line tool."""

from __future__ import annotations

import os

ALERT_RULE_SET: str = os.environ.get("COACH_ALERT_RULE_SET", "standard")
LOG_LEVEL: str = os.environ.get("COACH_LOG_LEVEL", "INFO").upper()
JSON_INDENT: int = int(os.environ.get("COACH_JSON_INDENT", "2"))
