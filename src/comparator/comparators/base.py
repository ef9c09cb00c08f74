"""Base class for comparators."""

from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List

CompareFunction = Callable[[Any, Any], int]


class Comparator(ABC):
    """A two-argument ordering function.

    ``compare(a, b)`` is negative if a sorts before b, zero if both are equal
    and positive if a sorts after b.
    """

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        pass

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def key(self) -> Callable[[Any], Any]:
        """Return a key function for ``sorted`` and ``list.sort``."""
        return cmp_to_key(self.compare)

    def sort(self, items: Iterable[Any]) -> List[Any]:
        """Return a new list with the items in order, equal items keep their order."""
        return sorted(items, key=self.key())
