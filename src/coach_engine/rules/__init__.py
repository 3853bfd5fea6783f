"""Alert rule tables. Each module declaring RULE_SET_NAME is a rule set."""
