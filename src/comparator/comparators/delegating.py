"""Comparator that compares field values with a custom comparator."""

from typing import Any, Optional

from comparator.comparators.base import Comparator, CompareFunction
from comparator.extractors import DefaultValueExtractor, ValueExtractor


class DelegatingComparator(Comparator):
    """Extracts the values of a field path and hands them to another comparator."""

    def __init__(self, field: Optional[str], comparator: CompareFunction, value_extractor: Optional[ValueExtractor] = None) -> None:
        if comparator is None:
            raise ValueError("Comparator must not be None")
        self.field = field or ""
        self.comparator = comparator
        self.value_extractor = value_extractor if value_extractor is not None else DefaultValueExtractor()

    def compare(self, a: Any, b: Any) -> int:
        va = self.value_extractor.find_value(a, self.field)
        vb = self.value_extractor.find_value(b, self.field)
        return self.comparator(va, vb)

    def __repr__(self) -> str:
        return f"DelegatingComparator(field={self.field!r}, comparator={self.comparator!r})"
