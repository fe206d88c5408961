from .ast_walker import ASTWalker
from .node_types import ParseResult
from .parser import PomParser
from .pom_patterns import PomPatterns

__all__ = ["ASTWalker", "ParseResult", "PomParser", "PomPatterns"]
