from functools import cmp_to_key
from typing import Callable, Iterable, List

from .models import DependencyRecord

Comparator = Callable[[DependencyRecord, DependencyRecord], int]


def _compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_by_group_id(a: DependencyRecord, b: DependencyRecord) -> int:
    return _compare(a.group_id or "", b.group_id or "")


def compare_by_artifact_id(a: DependencyRecord, b: DependencyRecord) -> int:
    return _compare(a.artifact_id or "", b.artifact_id or "")


def then(first: Comparator, second: Comparator) -> Comparator:
    """Chain two comparators: `second` only breaks ties left by `first`."""

    def chained(a: DependencyRecord, b: DependencyRecord) -> int:
        return first(a, b) or second(a, b)

    return chained


compare_group_then_artifact: Comparator = then(compare_by_group_id, compare_by_artifact_id)


def stable_sort(records: Iterable[DependencyRecord], cmp: Comparator = compare_group_then_artifact) -> List[DependencyRecord]:
    # sorted() is stable, equal coordinates keep document order
    return sorted(records, key=cmp_to_key(cmp))
