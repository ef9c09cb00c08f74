"""Mapping between sort orders and the sort abstraction of data access layers."""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

import pymongo
from pydantic import BaseModel, Field

from comparator.models import CaseHandling, Direction, NullHandling, SortOrder, SortOrders


class NullHandlingHint(str, Enum):
    """Null handling hint of a data access layer order."""

    NATIVE = "native"
    NULLS_FIRST = "nulls_first"
    NULLS_LAST = "nulls_last"


class Order(BaseModel):
    """Order of a single property as understood by a data access layer."""

    model_config = {"frozen": True}

    property: str = Field(description="Property name")
    ascending: bool = True
    ignore_case: bool = False
    null_handling: NullHandlingHint = NullHandlingHint.NATIVE


class Sort(BaseModel):
    """Ordered list of property orders."""

    model_config = {"frozen": True}

    orders: Tuple[Order, ...] = ()

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @classmethod
    def by(cls, *orders: Order) -> "Sort":
        return cls(orders=orders)

    def is_sorted(self) -> bool:
        return bool(self.orders)

    def get_order_for(self, property_name: str) -> Optional[Order]:
        return next((order for order in self.orders if order.property == property_name), None)


class PageRequest(BaseModel):
    """Page number, page size and sort of a paged query."""

    model_config = {"frozen": True}

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: Sort = Field(default_factory=Sort.unsorted)


SortOrderSource = Optional[Union[SortOrders, Iterable[Optional[SortOrder]]]]


class SortMapper:
    """Converts sort orders from and to the sort abstraction of a data access layer.

    Args:
        null_handling_supported: Whether the data access layer honors null handling
            hints; if not, orders get the NATIVE hint
        native_null_handling_is_nulls_first: Null placement assumed for NATIVE hints
    """

    def __init__(self, null_handling_supported: bool = True, native_null_handling_is_nulls_first: bool = False) -> None:
        self.null_handling_supported = null_handling_supported
        self.native_null_handling_is_nulls_first = native_null_handling_is_nulls_first

    def _null_handling_hint(self, nulls_first: bool) -> NullHandlingHint:
        if not self.null_handling_supported:
            return NullHandlingHint.NATIVE
        return NullHandlingHint.NULLS_FIRST if nulls_first else NullHandlingHint.NULLS_LAST

    def to_order(self, sort_order: Optional[SortOrder]) -> Optional[Order]:
        """Convert a sort order, None if it has no field."""
        if sort_order is None or not sort_order.field:
            return None
        return Order(
            property=sort_order.field,
            ascending=sort_order.is_asc,
            ignore_case=sort_order.is_ignore_case,
            null_handling=self._null_handling_hint(sort_order.is_nulls_first),
        )

    def from_order(self, order: Optional[Order]) -> Optional[SortOrder]:
        if order is None:
            return None
        if order.null_handling == NullHandlingHint.NATIVE:
            nulls_first = self.native_null_handling_is_nulls_first
        else:
            nulls_first = order.null_handling == NullHandlingHint.NULLS_FIRST
        return SortOrder(
            field=order.property,
            direction=Direction.ASC if order.ascending else Direction.DESC,
            case_handling=CaseHandling.INSENSITIVE if order.ignore_case else CaseHandling.SENSITIVE,
            null_handling=NullHandling.NULLS_FIRST if nulls_first else NullHandling.NULLS_LAST,
        )

    def to_sort(self, sort_orders: SortOrderSource) -> Sort:
        """Convert sort orders, sort orders without field are dropped."""
        orders = [self.to_order(sort_order) for sort_order in sort_orders or ()]
        return Sort(orders=tuple(order for order in orders if order is not None))

    def from_sort(self, sort: Optional[Sort]) -> List[SortOrder]:
        if sort is None:
            return []
        return [self.from_order(order) for order in sort.orders]

    def apply_defaults(
        self,
        source: Optional[Sort],
        *properties: str,
        asc: Optional[bool] = None,
        ignore_case: Optional[bool] = None,
        nulls_first: Optional[bool] = None,
    ) -> Sort:
        """Override direction, case and null handling of the named properties.

        Args:
            source: Sort to change; None gives an unsorted sort
            properties: Names of the properties to change, all if none are given
            asc: New direction, unchanged if None
            ignore_case: New case handling, unchanged if None
            nulls_first: New null handling, unchanged if None

        Returns:
            A new sort, or source itself if nothing is overridden
        """
        if source is None:
            return Sort.unsorted()
        if asc is None and ignore_case is None and nulls_first is None:
            return source

        names = set(properties) or {order.property for order in source.orders}
        orders = []
        for order in source.orders:
            if order.property not in names:
                orders.append(order)
                continue
            changes = {}
            if asc is not None:
                changes["ascending"] = asc
            if ignore_case is not None:
                changes["ignore_case"] = ignore_case
            if nulls_first is not None:
                changes["null_handling"] = self._null_handling_hint(nulls_first)
            orders.append(order.model_copy(update=changes))
        return Sort(orders=tuple(orders))

    def apply_page_defaults(
        self,
        source: Optional[PageRequest],
        *properties: str,
        asc: Optional[bool] = None,
        ignore_case: Optional[bool] = None,
        nulls_first: Optional[bool] = None,
    ) -> Optional[PageRequest]:
        """Apply ``apply_defaults`` to the sort of a page request, None stays None."""
        if source is None:
            return None
        sort = self.apply_defaults(source.sort, *properties, asc=asc, ignore_case=ignore_case, nulls_first=nulls_first)
        return source.model_copy(update={"sort": sort})

    @staticmethod
    def to_mongo_sort(sort_orders: SortOrderSource) -> List[Tuple[str, int]]:
        """Convert sort orders to a pymongo sort specification.

        Case and null handling cannot be expressed and are dropped.
        """
        return [
            (sort_order.field, pymongo.ASCENDING if sort_order.is_asc else pymongo.DESCENDING)
            for sort_order in sort_orders or ()
            if sort_order is not None and sort_order.field
        ]

    @classmethod
    def to_sort_stage(cls, sort_orders: SortOrderSource) -> Dict[str, Dict[str, int]]:
        """Build a MongoDB $sort aggregation stage."""
        return {"$sort": dict(cls.to_mongo_sort(sort_orders))}
