import logging
from pathlib import Path
from typing import List, Sequence

from .buffer import SORT_ACTION_NAME, StringBuffer, TextBuffer, apply
from .comparators import Comparator, compare_group_then_artifact, stable_sort
from .extractor import DependencyExtractor
from .manifest import read_manifest
from .models import DependencyRecord, FixResult, InternalIssue, Replacement

logger = logging.getLogger(__name__)


def plan(original: Sequence[DependencyRecord], cmp: Comparator = compare_group_then_artifact) -> List[Replacement]:
    """Replacements that put the entries in sorted order.

    Position i of the document receives the verbatim text of the i-th entry
    of the sorted list. Positions already holding that text are skipped.
    """
    replacements = []
    for old, new in zip(original, stable_sort(original, cmp)):
        if old.text != new.text:
            replacements.append(Replacement(old.span, new.text))
    return replacements


class AutoFixEngine:
    """Sorts the dependencies of a manifest in place"""

    def __init__(self, comparator: Comparator = compare_group_then_artifact):
        self.comparator = comparator
        self.extractor = DependencyExtractor()
        self._fixable = {"unsorted-dependencies"}

    def can_fix(self, rule_id: str) -> bool:
        return rule_id in self._fixable

    def fix_buffer(self, buffer: TextBuffer) -> int:
        """Parse the buffer, then rewrite it sorted. Returns the number of edits."""
        dependencies = self.extractor.extract(buffer.get_text())
        replacements = plan(dependencies.records, self.comparator)
        apply(buffer, replacements, SORT_ACTION_NAME)
        return len(replacements)

    def fix_string(self, source: str) -> FixResult:
        buffer = StringBuffer(source)
        count = self.fix_buffer(buffer)
        return FixResult(source=buffer.get_text(), modified=count > 0, replacements=count)

    def apply_fixes(self, file_path: Path, issues: List[InternalIssue]) -> str:
        content = read_manifest(file_path)
        if not any(self.can_fix(i.rule_id) for i in issues):
            return content

        result = self.fix_string(content)
        logger.info("Sorted dependencies in %s (%d entries moved)", file_path, result.replacements)
        return result.source
