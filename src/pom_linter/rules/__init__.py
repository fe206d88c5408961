from .base import BaseRule
from .ordering_rules import UnsortedDependenciesRule, find_first_violation

__all__ = ["BaseRule", "UnsortedDependenciesRule", "find_first_violation"]
