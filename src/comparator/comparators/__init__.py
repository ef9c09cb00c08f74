"""Comparators built from sort orders."""

from comparator.comparators.base import Comparator, CompareFunction
from comparator.comparators.chain import ComparatorChain
from comparator.comparators.delegating import DelegatingComparator
from comparator.comparators.value import ValueComparator

__all__ = [
    "Comparator",
    "CompareFunction",
    "ComparatorChain",
    "DelegatingComparator",
    "ValueComparator",
]
