"""Maven-specific AST pattern recognition."""

import re
from typing import List, Optional

from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import CONTENT, ELEMENT, EMPTY_TAG, END_TAG, START_TAG

_TAG_NAME = re.compile(r"<\s*([^\s/>]+)")
_XML_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)


class PomPatterns:
    """Recognize Maven POM structures in the XML AST."""

    @staticmethod
    def start_tag(node: Node) -> Optional[Node]:
        """Return the start tag (or self-closing tag) of an element."""
        if node.type != ELEMENT:
            return None
        return ASTWalker.get_child_of_type(node, START_TAG) or ASTWalker.get_child_of_type(
            node, EMPTY_TAG
        )

    @staticmethod
    def element_name(node: Node, source: bytes | str) -> Optional[str]:
        """Local tag name of an element, without any namespace prefix.

        Examples: <dependency>, <m:dependency>, <groupId/> -> dependency, dependency, groupId
        """
        tag = PomPatterns.start_tag(node)
        if tag is None:
            return None
        match = _TAG_NAME.match(ASTWalker.get_text(tag, source))
        if not match:
            return None
        return match.group(1).split(":")[-1]

    @staticmethod
    def child_elements(node: Node) -> List[Node]:
        """Direct child elements of an element (or of the document node)."""
        children = []
        for child in node.children:
            if child.type == ELEMENT:
                children.append(child)
            elif child.type == CONTENT:
                children.extend(c for c in child.children if c.type == ELEMENT)
        return children

    @staticmethod
    def child_elements_named(node: Node, name: str, source: bytes | str) -> List[Node]:
        return [c for c in PomPatterns.child_elements(node) if PomPatterns.element_name(c, source) == name]

    @staticmethod
    def first_child_named(node: Node, name: str, source: bytes | str) -> Optional[Node]:
        matches = PomPatterns.child_elements_named(node, name, source)
        return matches[0] if matches else None

    @staticmethod
    def root_element(document: Node) -> Optional[Node]:
        """The document's single top-level element."""
        elements = PomPatterns.child_elements(document)
        return elements[0] if elements else None

    @staticmethod
    def element_text(node: Node, source: bytes | str) -> str:
        """Text content between the start and end tags, comments removed and stripped.

        Self-closing elements have no content and yield an empty string.
        """
        start = ASTWalker.get_child_of_type(node, START_TAG)
        end = ASTWalker.get_child_of_type(node, END_TAG)
        if start is None or end is None:
            return ""
        data = source.encode("utf-8") if isinstance(source, str) else source
        inner = data[start.end_byte : end.start_byte].decode("utf-8")
        return _XML_COMMENT.sub("", inner).strip()
