import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .extractor import DependencyExtractor
from .manifest import DEFAULT_MANIFEST_PATTERNS, is_manifest_file, read_manifest
from .models import InternalIssue
from .registry import LintRule, RuleRegistry

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for manifest linting"""

    def __init__(self, registry: Optional[RuleRegistry] = None, manifest_patterns: Iterable[str] = DEFAULT_MANIFEST_PATTERNS):
        self.extractor = DependencyExtractor()
        self.registry = registry or RuleRegistry()
        self.manifest_patterns = list(manifest_patterns)
        self.issues: List[InternalIssue] = []

    def is_manifest(self, file_path: Path) -> bool:
        return is_manifest_file(file_path, self.manifest_patterns)

    def analyze_string(self, source: str, file_path: Path = Path("pom.xml"), rules: Optional[List[LintRule]] = None) -> List[InternalIssue]:
        """Run lint checks on manifest text. Raises ParseError on malformed XML."""
        dependencies = self.extractor.extract(source)

        self.issues = []
        for rule in rules if rules is not None else self.registry.get_all_rules():
            self.issues.extend(rule.check(file_path, dependencies))

        return sorted(self.issues, key=lambda x: x.line)

    def analyze_file(self, file_path: Path, rules: Optional[List[LintRule]] = None) -> List[InternalIssue]:
        """Run all lint checks on a file; files that are not manifests are skipped"""
        if not self.is_manifest(file_path):
            logger.debug("Skipping %s: not a manifest file", file_path)
            return []
        return self.analyze_string(read_manifest(file_path), file_path, rules)
