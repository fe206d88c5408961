from dataclasses import dataclass, field
from typing import List, Optional

from tree_sitter import Node, Tree

# Node types produced by the tree-sitter-xml grammar
ELEMENT = "element"
CONTENT = "content"
START_TAG = "STag"
END_TAG = "ETag"
EMPTY_TAG = "EmptyElemTag"
COMMENT = "Comment"


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: str
    source_bytes: bytes
    errors: List[str]
    _char_offsets: Optional[List[int]] = field(default=None, init=False, repr=False)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def char_offset(self, byte_offset: int) -> int:
        """Convert a byte offset in the UTF-8 encoded source to a str offset."""
        if len(self.source_bytes) == len(self.source):
            return byte_offset
        if self._char_offsets is None:
            # one entry per byte, plus the end of the source
            offsets: List[int] = []
            for index, char in enumerate(self.source):
                offsets.extend([index] * len(char.encode("utf-8")))
            offsets.append(len(self.source))
            self._char_offsets = offsets
        return self._char_offsets[byte_offset]
