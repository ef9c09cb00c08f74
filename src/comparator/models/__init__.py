"""Models package for sort orders."""

from comparator.models.enums import CaseHandling, Direction, NullHandling
from comparator.models.sort_order import SortOrder
from comparator.models.sort_orders import SortOrders
from comparator.models.text_properties import SortOrdersTextProperties

__all__ = [
    "CaseHandling",
    "Direction",
    "NullHandling",
    "SortOrder",
    "SortOrders",
    "SortOrdersTextProperties",
]
