"""Comparator chain."""

from typing import Any, Iterable, Tuple

from comparator.comparators.base import Comparator, CompareFunction


class ComparatorChain(Comparator):
    """Evaluates comparators in order and returns the first non-zero result.

    An empty chain treats all objects as equal, so a stable sort keeps their order.
    """

    def __init__(self, comparators: Iterable[CompareFunction] = ()) -> None:
        self.comparators: Tuple[CompareFunction, ...] = tuple(comparators)

    def compare(self, a: Any, b: Any) -> int:
        for comparator in self.comparators:
            result = comparator(a, b)
            if result != 0:
                return result
        return 0

    def is_empty(self) -> bool:
        return not self.comparators

    def __len__(self) -> int:
        return len(self.comparators)

    def __repr__(self) -> str:
        return f"ComparatorChain({list(self.comparators)!r})"
