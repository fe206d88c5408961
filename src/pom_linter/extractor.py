import logging
from pathlib import Path

from pom_tree_sitter import ParseResult, PomParser, PomPatterns
from tree_sitter import Node

from .exceptions import ParseError
from .manifest import read_manifest
from .models import DependencyList, DependencyRecord, Span

logger = logging.getLogger(__name__)

PROJECT_TAG = "project"
DEPENDENCIES_TAG = "dependencies"
DEPENDENCY_TAG = "dependency"
GROUP_ID_TAG = "groupId"
ARTIFACT_ID_TAG = "artifactId"


class DependencyExtractor:
    """Extracts the project's <dependency> entries from a Maven manifest"""

    def __init__(self):
        self.parser = PomParser()

    def extract(self, text: str) -> DependencyList:
        result = self.parser.parse_string(text)
        if result.errors:
            raise ParseError("Manifest is not well-formed XML", result.errors)

        root = PomPatterns.root_element(result.root)
        if root is None:
            raise ParseError("Manifest has no root element")

        source = result.source_bytes
        if PomPatterns.element_name(root, source) != PROJECT_TAG:
            logger.debug("Root element is not <project>, nothing to check")
            return DependencyList()

        container = PomPatterns.first_child_named(root, DEPENDENCIES_TAG, source)
        if container is None:
            logger.debug("No <dependencies> section found")
            return DependencyList()

        records = [
            self._to_record(node, result)
            for node in PomPatterns.child_elements_named(container, DEPENDENCY_TAG, source)
        ]
        logger.debug("Extracted %d dependencies", len(records))
        return DependencyList(
            records=records,
            container=self._span(container, result),
            container_line=container.start_point[0] + 1,
        )

    def extract_file(self, file_path: Path) -> DependencyList:
        return self.extract(read_manifest(Path(file_path)))

    def _to_record(self, node: Node, result: ParseResult) -> DependencyRecord:
        source = result.source_bytes
        span = self._span(node, result)
        return DependencyRecord(
            span=span,
            text=result.source[span.start : span.end],
            group_id=self._child_text(node, GROUP_ID_TAG, source),
            artifact_id=self._child_text(node, ARTIFACT_ID_TAG, source),
            line=node.start_point[0] + 1,
        )

    @staticmethod
    def _child_text(node: Node, name: str, source: bytes) -> str:
        child = PomPatterns.first_child_named(node, name, source)
        return PomPatterns.element_text(child, source) if child is not None else ""

    @staticmethod
    def _span(node: Node, result: ParseResult) -> Span:
        return Span(result.char_offset(node.start_byte), result.char_offset(node.end_byte))


_default_extractor: DependencyExtractor | None = None


def parse(text: str) -> DependencyList:
    """Parse manifest text into its dependency records, in document order.

    Raises ParseError when the markup is malformed. A manifest without a
    <dependencies> section yields an empty list.
    """
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = DependencyExtractor()
    return _default_extractor.extract(text)
