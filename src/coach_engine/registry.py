"""Alert rule registry with auto-discovery of rule-set modules."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Callable, Iterable
from pathlib import Path
from types import ModuleType

from coach_engine.exceptions import (
    DuplicateRuleError,
    RuleConfigurationError,
    UnknownRuleSetError,
)
from coach_engine.rules.base import AlertRule

logger = logging.getLogger(__name__)

DEFAULT_RULE_SET = "standard"


def discover_rule_sets() -> dict[str, ModuleType]:
    """Scan the rules package for rule-set modules.

    A rule-set module declares ``RULE_SET_NAME``, a ``THRESHOLDS`` class and
    a ``build_rules(thresholds)`` factory. New rule sets are added simply by
    placing such a module in ``coach_engine/rules/``.

    Returns:
        Mapping of rule-set name to its module, sorted by name.
    """
    import coach_engine.rules as rules_pkg

    rules_path = Path(rules_pkg.__file__).parent  # type: ignore[arg-type]
    found: dict[str, ModuleType] = {}
    for _, module_name, _ in pkgutil.iter_modules(
        [str(rules_path)], prefix=rules_pkg.__name__ + "."
    ):
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            logger.warning("Could not import rule module %s", module_name)
            continue
        name = getattr(module, "RULE_SET_NAME", None)
        if name and callable(getattr(module, "build_rules", None)):
            found[name] = module
    return dict(sorted(found.items()))


class AlertRuleRegistry:
    """Ordered collection of AlertRule entries.

    Rules are evaluated in registration order, which is also the order
    alerts come back from the engine. Rule ids must be unique.
    """

    def __init__(self, rules: Iterable[AlertRule] = (), rule_set: str = "custom") -> None:
        self._rules: dict[str, AlertRule] = {}
        self.rule_set = rule_set
        for rule in rules:
            self.register(rule)

    @classmethod
    def from_rule_set(
        cls,
        name: str = DEFAULT_RULE_SET,
        thresholds: object | None = None,
    ) -> AlertRuleRegistry:
        """Build a registry from a discovered rule-set module.

        Args:
            name: Rule-set name, e.g. "standard" or "banded".
            thresholds: Optional threshold table instance for that rule set.

        Raises:
            UnknownRuleSetError: if no module declares ``name``.
            RuleConfigurationError: if ``thresholds`` belongs to another rule set.
        """
        rule_sets = discover_rule_sets()
        module = rule_sets.get(name)
        if module is None:
            raise UnknownRuleSetError(name, list(rule_sets))
        expected = getattr(module, "THRESHOLDS", None)
        if thresholds is not None and expected is not None and not isinstance(thresholds, expected):
            raise RuleConfigurationError(
                f"Rule set {name!r} expects {expected.__name__}, "
                f"got {type(thresholds).__name__}"
            )
        build: Callable[..., list[AlertRule]] = module.build_rules
        registry = cls(build(thresholds), rule_set=name)
        logger.debug("Loaded %d alert rules from rule set %r", len(registry), name)
        return registry

    def register(self, rule: AlertRule) -> None:
        """Append a rule. Raises DuplicateRuleError on a repeated rule_id."""
        if rule.rule_id in self._rules:
            raise DuplicateRuleError(rule.rule_id)
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> AlertRule | None:
        """Retrieve a rule by its rule_id."""
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[AlertRule]:
        """Return all registered rules in registration order."""
        return list(self._rules.values())

    @property
    def rule_ids(self) -> list[str]:
        """List all registered rule IDs."""
        return list(self._rules.keys())

    def __len__(self) -> int:
        return len(self._rules)
