"""Rule registry for the diagnostic engine.

Registration order is evaluation order, so the registry keeps rules in
the order they were added rather than sorting them.
"""

from __future__ import annotations

import logging

from assist_engine.diagnostics.base import BaseRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Ordered registry of line rules keyed by ``rule_id``."""

    def __init__(self) -> None:
        self._rules: dict[str, BaseRule] = {}

    def register(self, rule: BaseRule) -> None:
        """Append *rule* to the evaluation order.

        Raises
        ------
        ValueError
            If a rule with the same ``rule_id`` is already registered.
        """
        if rule.rule_id in self._rules:
            raise ValueError(
                f"Rule {rule.rule_id} is already registered. Unregister the existing rule first."
            )
        self._rules[rule.rule_id] = rule
        logger.debug("Registered diagnostic rule: %s", rule.rule_id)

    def unregister(self, rule_id: str) -> None:
        """Remove a rule.

        Raises
        ------
        KeyError
            If the rule is not registered.
        """
        if rule_id not in self._rules:
            raise KeyError(f"Rule {rule_id} is not registered.")
        del self._rules[rule_id]
        logger.debug("Unregistered diagnostic rule: %s", rule_id)

    def get(self, rule_id: str) -> BaseRule | None:
        return self._rules.get(rule_id)

    def get_all(self) -> list[BaseRule]:
        """Return all rules in evaluation order."""
        return list(self._rules.values())

    def get_ids(self) -> list[str]:
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: str) -> bool:
        return rule_id in self._rules
