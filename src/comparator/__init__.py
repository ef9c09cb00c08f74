"""Comparators built from sort order texts."""

from comparator.builder import ComparatorBuilder, build_comparator
from comparator.comparators import Comparator, ComparatorChain, DelegatingComparator, ValueComparator
from comparator.exceptions import (
    ComparatorError,
    ComparisonTypeError,
    ConfigurationError,
    ExtractionError,
    ExtractionInvocationError,
)
from comparator.extractors import DefaultValueExtractor, FieldAccessible, ValueExtractor
from comparator.models import (
    CaseHandling,
    Direction,
    NullHandling,
    SortOrder,
    SortOrders,
    SortOrdersTextProperties,
)
from comparator.text_codec import (
    format_sort_order,
    format_sort_orders,
    parse_sort_order,
    parse_sort_orders,
)

__all__ = [
    # Builder
    "ComparatorBuilder",
    "build_comparator",
    # Comparators
    "Comparator",
    "ComparatorChain",
    "DelegatingComparator",
    "ValueComparator",
    # Value extractors
    "DefaultValueExtractor",
    "FieldAccessible",
    "ValueExtractor",
    # Models
    "CaseHandling",
    "Direction",
    "NullHandling",
    "SortOrder",
    "SortOrders",
    "SortOrdersTextProperties",
    # Text codec
    "format_sort_order",
    "format_sort_orders",
    "parse_sort_order",
    "parse_sort_orders",
    # Exceptions
    "ComparatorError",
    "ComparisonTypeError",
    "ConfigurationError",
    "ExtractionError",
    "ExtractionInvocationError",
]
