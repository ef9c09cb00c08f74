"""Sort orders model."""

from typing import TYPE_CHECKING, Iterator, Optional, Tuple

from pydantic import BaseModel, Field

from comparator.models.sort_order import SortOrder
from comparator.models.text_properties import SortOrdersTextProperties

if TYPE_CHECKING:
    from comparator.comparators import ComparatorChain
    from comparator.extractors import ValueExtractor


class SortOrders(BaseModel):
    """A list of sort orders, the first one has the highest priority.

    An empty list means unsorted.
    """

    model_config = {"frozen": True}

    sort_orders: Tuple[SortOrder, ...] = Field(default=(), description="The list of sort orders")

    @classmethod
    def by(cls, *sort_orders: SortOrder) -> "SortOrders":
        return cls(sort_orders=tuple(sort_order for sort_order in sort_orders if sort_order is not None))

    def is_empty(self) -> bool:
        return not self.sort_orders

    def is_sorted(self) -> bool:
        return not self.is_empty()

    def is_unsorted(self) -> bool:
        return not self.is_sorted()

    def __len__(self) -> int:
        return len(self.sort_orders)

    def __iter__(self) -> Iterator[SortOrder]:  # type: ignore[override]
        return iter(self.sort_orders)

    def __getitem__(self, index: int) -> SortOrder:
        return self.sort_orders[index]

    def to_comparator(self, value_extractor: Optional["ValueExtractor"] = None) -> "ComparatorChain":
        """Build the comparator chain of these sort orders, a no-op chain if unsorted."""
        from comparator.builder import ComparatorBuilder

        return ComparatorBuilder().add_all(self.sort_orders, value_extractor).build()

    def to_text(self, properties: Optional[SortOrdersTextProperties] = None) -> str:
        """Create the sort orders text, e.g. ``name,asc,sensitive,nullslast;age,desc,sensitive,nullsfirst``."""
        from comparator.text_codec import format_sort_orders

        return format_sort_orders(self, properties)

    @classmethod
    def from_text(cls, source: Optional[str], properties: Optional[SortOrdersTextProperties] = None) -> "SortOrders":
        """Parse a sort orders text."""
        from comparator.text_codec import parse_sort_orders

        return parse_sort_orders(source, properties)

    def __str__(self) -> str:
        return self.to_text()
