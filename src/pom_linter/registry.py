from pathlib import Path
from typing import Protocol

from .models import DependencyList, InternalIssue


class LintRule(Protocol):
    """Protocol for a linting rule"""

    rule_id: str

    def check(self, file_path: Path, dependencies: DependencyList) -> list[InternalIssue]: ...


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self):
        self._rules: list[LintRule] = []
        self._load_builtin_rules()

    def register(self, rule: LintRule):
        self._rules.append(rule)

    def get_all_rules(self) -> list[LintRule]:
        return self._rules

    def get_enabled_rules(self, select: list[str] | None = None, ignore: list[str] | None = None) -> list[LintRule]:
        """Rules whose id starts with a selected prefix and is not ignored"""
        enabled = []
        for rule in self._rules:
            if select and not any(rule.rule_id.startswith(prefix) for prefix in select):
                continue
            if ignore and rule.rule_id in ignore:
                continue
            enabled.append(rule)
        return enabled

    def _load_builtin_rules(self):
        from .rules.ordering_rules import UnsortedDependenciesRule

        self.register(UnsortedDependenciesRule())

