"""Comparator of field values."""

import math
from typing import Any, Optional

from comparator.comparators.base import Comparator
from comparator.exceptions import ComparisonTypeError
from comparator.extractors import DefaultValueExtractor, ValueExtractor
from comparator.models import SortOrder
from comparator.utils.logging import logger


def _is_null(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


class ValueComparator(Comparator):
    """Compares objects by the value of a field path according to a sort order.

    Nulls are placed first or last regardless of the direction, a float NaN
    counts as null since it has no position among other numbers. Strings are
    compared case-folded when the sort order ignores case, everything else must
    support ``<`` and ``>`` with each other.
    """

    def __init__(self, sort_order: Optional[SortOrder] = None, value_extractor: Optional[ValueExtractor] = None) -> None:
        self.sort_order = sort_order if sort_order is not None else SortOrder()
        self.value_extractor = value_extractor if value_extractor is not None else DefaultValueExtractor()

    @property
    def field(self) -> str:
        return self.sort_order.field

    def compare(self, a: Any, b: Any) -> int:
        if self.field:
            va = self.value_extractor.find_value(a, self.field)
            vb = self.value_extractor.find_value(b, self.field)
        else:
            va, vb = a, b

        a_null, b_null = _is_null(va), _is_null(vb)
        if a_null and b_null:
            return 0
        if a_null:
            return -1 if self.sort_order.is_nulls_first else 1
        if b_null:
            return 1 if self.sort_order.is_nulls_first else -1

        result = self._compare_values(va, vb)
        return result if self.sort_order.is_asc else -result

    def _compare_values(self, va: Any, vb: Any) -> int:
        if self.sort_order.is_ignore_case and isinstance(va, str) and isinstance(vb, str):
            va, vb = va.casefold(), vb.casefold()
        try:
            return (va > vb) - (va < vb)
        except TypeError as e:
            left, right = type(va).__qualname__, type(vb).__qualname__
            logger.debug(f"Cannot compare values of field '{self.field}': {e}")
            raise ComparisonTypeError(self.field, left, right) from e

    def __repr__(self) -> str:
        return f"ValueComparator(sort_order={self.sort_order!r})"
