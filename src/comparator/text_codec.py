"""Parser and formatter of the sort order text format.

A sort orders text is a list of sort order texts joined by the sort order
separator. A sort order text starts with the field path, followed by optional
direction, case and null tokens in any order::

    lastName,asc,ignorecase;firstName;age,desc,nullsfirst

Unknown tokens are ignored and missing tokens fall back to ascending, case
sensitive and nulls last.
"""

from typing import Optional

from comparator.models.enums import CaseHandling, Direction, NullHandling
from comparator.models.sort_order import SortOrder
from comparator.models.sort_orders import SortOrders
from comparator.models.text_properties import SortOrdersTextProperties
from comparator.utils.logging import logger


def _properties(properties: Optional[SortOrdersTextProperties]) -> SortOrdersTextProperties:
    return properties if properties is not None else SortOrdersTextProperties.defaults()


def parse_sort_order(source: Optional[str], properties: Optional[SortOrdersTextProperties] = None) -> SortOrder:
    """Parse a single sort order text.

    Args:
        source: Sort order text, e.g. ``name,desc,ignorecase``
        properties: Token vocabulary, the defaults if None

    Returns:
        The sort order; a sort order without field if source is None
    """
    if source is None:
        return SortOrder()
    props = _properties(properties)

    field, *args = source.split(props.sort_order_args_separator)
    direction: Optional[Direction] = None
    case_handling: Optional[CaseHandling] = None
    null_handling: Optional[NullHandling] = None

    for arg in args:
        token = arg.strip()
        if not token:
            continue
        if direction is None and (value := props.direction_of(token)) is not None:
            direction = value
        elif case_handling is None and (value := props.case_handling_of(token)) is not None:
            case_handling = value
        elif null_handling is None and (value := props.null_handling_of(token)) is not None:
            null_handling = value
        else:
            logger.debug(f"Ignoring token '{token}' of sort order text '{source}'")

    return SortOrder(
        field=field,
        direction=direction or Direction.ASC,
        case_handling=case_handling or CaseHandling.SENSITIVE,
        null_handling=null_handling or NullHandling.NULLS_LAST,
    )


def parse_sort_orders(source: Optional[str], properties: Optional[SortOrdersTextProperties] = None) -> SortOrders:
    """Parse a sort orders text.

    Blank sort order texts between separators are skipped, so an empty or
    blank source yields unsorted sort orders.
    """
    if source is None:
        return SortOrders()
    props = _properties(properties)
    return SortOrders(
        sort_orders=tuple(
            parse_sort_order(text, props)
            for text in source.split(props.sort_order_separator)
            if text.strip()
        )
    )


def format_sort_order(sort_order: SortOrder, properties: Optional[SortOrdersTextProperties] = None) -> str:
    """Format a sort order with all four args in canonical order."""
    props = _properties(properties)
    return props.sort_order_args_separator.join(
        (
            sort_order.field,
            props.direction_value(sort_order.direction),
            props.case_handling_value(sort_order.case_handling),
            props.null_handling_value(sort_order.null_handling),
        )
    )


def format_sort_orders(sort_orders: SortOrders, properties: Optional[SortOrdersTextProperties] = None) -> str:
    props = _properties(properties)
    return props.sort_order_separator.join(format_sort_order(sort_order, props) for sort_order in sort_orders)
