from pathlib import Path
from typing import Optional, Sequence

from ..comparators import Comparator, compare_group_then_artifact
from ..models import DependencyList, DependencyRecord, InternalIssue, Severity
from .base import BaseRule


def find_first_violation(
    records: Sequence[DependencyRecord], cmp: Comparator = compare_group_then_artifact
) -> Optional[int]:
    """Index of the first entry that sorts before its predecessor, or None.

    Stops at the first out-of-order pair: one sort action fixes them all.
    """
    for i in range(1, len(records)):
        if cmp(records[i - 1], records[i]) > 0:
            return i
    return None


class UnsortedDependenciesRule(BaseRule):
    """Flags a <dependencies> list not sorted by groupId, then artifactId."""

    MESSAGE_KEY = "inspection.unsorted.dependencies.name"

    def __init__(self, comparator: Comparator = compare_group_then_artifact):
        self.comparator = comparator

    @property
    def rule_id(self) -> str:
        return "unsorted-dependencies"

    @property
    def name(self) -> str:
        return "Unsorted dependencies"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    @property
    def description(self) -> str:
        return "Dependencies should be declared in order of groupId, then artifactId."

    def check(self, file_path: Path, dependencies: DependencyList) -> list[InternalIssue]:
        index = find_first_violation(dependencies.records, self.comparator)
        if index is None:
            return []

        previous, current = dependencies[index - 1], dependencies[index]
        return [
            self._create_issue(
                file_path,
                dependencies.container_line,
                f"Dependencies are not sorted: '{current.coordinates}' (line {current.line}) "
                f"should come before '{previous.coordinates}'",
                context=str(index),
                message_key=self.MESSAGE_KEY,
            )
        ]
