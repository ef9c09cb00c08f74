"""Fluent builder of comparator chains."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Union

from comparator.comparators import ComparatorChain, CompareFunction, DelegatingComparator, ValueComparator
from comparator.extractors import ValueExtractor
from comparator.models import CaseHandling, Direction, NullHandling, SortOrder, SortOrders, SortOrdersTextProperties
from comparator.text_codec import parse_sort_orders
from comparator.utils.logging import logger


class ComparatorBuilder:
    """A helper class to assemble a comparator chain.

    Example::

        comparator = ComparatorBuilder().add("last_name").add("first_name", ignore_case=True).build()
        people.sort(key=comparator.key())
    """

    def __init__(self) -> None:
        self.comparators: List[CompareFunction] = []

    def add(
        self,
        field: Optional[str],
        asc: bool = True,
        ignore_case: bool = False,
        nulls_first: bool = False,
        value_extractor: Optional[ValueExtractor] = None,
    ) -> ComparatorBuilder:
        """Add a comparator of the values of a field path."""
        sort_order = SortOrder(
            field=field,
            direction=Direction.ASC if asc else Direction.DESC,
            case_handling=CaseHandling.INSENSITIVE if ignore_case else CaseHandling.SENSITIVE,
            null_handling=NullHandling.NULLS_FIRST if nulls_first else NullHandling.NULLS_LAST,
        )
        return self.add_sort_order(sort_order, value_extractor)

    def add_comparator(self, comparator: Optional[CompareFunction]) -> ComparatorBuilder:
        """Add a comparator, None is ignored."""
        if comparator is not None:
            self.comparators.append(comparator)
        return self

    def add_delegate(
        self,
        field: Optional[str],
        comparator: Optional[CompareFunction],
        value_extractor: Optional[ValueExtractor] = None,
    ) -> ComparatorBuilder:
        """Add a custom comparator of the values of a field path, None is ignored."""
        if comparator is None:
            return self
        return self.add_comparator(DelegatingComparator(field, comparator, value_extractor))

    def add_sort_order(self, sort_order: Optional[SortOrder], value_extractor: Optional[ValueExtractor] = None) -> ComparatorBuilder:
        """Add a comparator of a sort order, None is ignored."""
        if sort_order is None:
            return self
        return self.add_comparator(ValueComparator(sort_order, value_extractor))

    def add_all(
        self,
        sort_orders: Optional[Union[SortOrders, Iterable[Optional[SortOrder]]]],
        value_extractor: Optional[ValueExtractor] = None,
    ) -> ComparatorBuilder:
        """Add a comparator for each sort order in priority order."""
        for sort_order in sort_orders or ():
            self.add_sort_order(sort_order, value_extractor)
        return self

    def add_all_with(
        self,
        sort_orders: Optional[Union[SortOrders, Iterable[Optional[SortOrder]]]],
        comparator_function: Callable[[SortOrder], Optional[CompareFunction]],
    ) -> ComparatorBuilder:
        """Add the comparator the given function creates for each sort order."""
        for sort_order in sort_orders or ():
            if sort_order is not None:
                self.add_comparator(comparator_function(sort_order))
        return self

    def add_text(
        self,
        text: Optional[str],
        properties: Optional[SortOrdersTextProperties] = None,
        value_extractor: Optional[ValueExtractor] = None,
    ) -> ComparatorBuilder:
        """Parse a sort orders text and add its sort orders."""
        return self.add_all(parse_sort_orders(text, properties), value_extractor)

    def build(self) -> ComparatorChain:
        logger.debug(f"Building comparator chain of {len(self.comparators)} comparators")
        return ComparatorChain(self.comparators)


def build_comparator(
    source: Optional[Union[str, SortOrder, SortOrders]],
    properties: Optional[SortOrdersTextProperties] = None,
    value_extractor: Optional[ValueExtractor] = None,
) -> ComparatorChain:
    """Build a comparator chain from a sort orders text, a sort order or sort orders.

    Args:
        source: The sort criteria; None builds a no-op chain
        properties: Token vocabulary used to parse a text source
        value_extractor: Value extractor of the comparators, the default one if None

    Returns:
        The comparator chain
    """
    builder = ComparatorBuilder()
    if isinstance(source, SortOrder):
        return builder.add_sort_order(source, value_extractor).build()
    if isinstance(source, str):
        return builder.add_text(source, properties, value_extractor).build()
    return builder.add_all(source, value_extractor).build()
