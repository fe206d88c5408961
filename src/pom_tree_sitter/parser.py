from typing import List

import tree_sitter_xml as tsxml
from tree_sitter import Language, Node, Parser

from .ast_walker import ASTWalker
from .node_types import ParseResult


class PomParser:
    """Thin wrapper around the tree-sitter XML grammar for Maven manifests"""

    def __init__(self):
        self.language = Language(tsxml.language_xml())
        self.parser = Parser(self.language)

    def parse_string(self, source: str) -> ParseResult:
        source_bytes = source.encode("utf-8")
        tree = self.parser.parse(source_bytes)
        errors = self._collect_errors(tree.root_node) if tree.root_node.has_error else []
        return ParseResult(tree=tree, source=source, source_bytes=source_bytes, errors=errors)

    @staticmethod
    def _collect_errors(root: Node) -> List[str]:
        errors: List[str] = []

        def check(node: Node):
            if node.is_error:
                row, col = node.start_point
                errors.append(f"Syntax error at line {row + 1}, column {col + 1}")
            elif node.is_missing:
                row, col = node.start_point
                errors.append(f"Missing '{node.type}' at line {row + 1}, column {col + 1}")

        ASTWalker.walk(root, check)
        # has_error can be set without a visible ERROR/MISSING node
        if not errors:
            errors.append("Document is not well-formed XML")
        return errors
