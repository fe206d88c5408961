from .autofix import AutoFixEngine, plan
from .buffer import StringBuffer, TextBuffer, apply
from .comparators import compare_group_then_artifact
from .engine import LinterEngine
from .exceptions import OutOfRangeError, ParseError, PomLintError
from .extractor import parse
from .manifest import is_manifest_file
from .models import DependencyList, DependencyRecord, Replacement, Span
from .rules.ordering_rules import find_first_violation

__all__ = [
    "AutoFixEngine",
    "DependencyList",
    "DependencyRecord",
    "LinterEngine",
    "OutOfRangeError",
    "ParseError",
    "PomLintError",
    "Replacement",
    "Span",
    "StringBuffer",
    "TextBuffer",
    "apply",
    "compare_group_then_artifact",
    "find_first_violation",
    "is_manifest_file",
    "parse",
    "plan",
]
