"""Tests for the comparator builder."""

import pytest

from comparator import ComparatorBuilder, build_comparator
from comparator.comparators import ComparatorChain, DelegatingComparator, ValueComparator
from comparator.extractors import DefaultValueExtractor
from comparator.models import CaseHandling, Direction, NullHandling, SortOrder, SortOrders, SortOrdersTextProperties


@pytest.fixture
def builder():
    return ComparatorBuilder()


@pytest.fixture
def records():
    return [
        {"name": "bob", "age": 3},
        {"name": "Alice", "age": None},
        {"name": "Bob", "age": 5},
    ]


def test_builder_initialization(builder):
    """Test that a builder starts without comparators."""
    assert builder.comparators == []
    assert builder.build().is_empty() is True


def test_add_returns_builder(builder):
    """Test method chaining."""
    assert builder.add("name") is builder
    assert builder.add_comparator(lambda a, b: 0) is builder
    assert len(builder.comparators) == 2


def test_add_field(builder):
    """Test that add creates a value comparator with the given settings."""
    builder.add("age", asc=False, ignore_case=True, nulls_first=True)

    comparator = builder.comparators[0]
    assert isinstance(comparator, ValueComparator)
    assert comparator.sort_order == SortOrder(
        field="age",
        direction=Direction.DESC,
        case_handling=CaseHandling.INSENSITIVE,
        null_handling=NullHandling.NULLS_FIRST,
    )


def test_add_field_defaults(builder):
    """Test the default settings of add."""
    builder.add("age")

    assert builder.comparators[0].sort_order == SortOrder(field="age")


def test_add_none_is_ignored(builder):
    """Test that None comparators and sort orders are skipped."""
    builder.add_comparator(None).add_sort_order(None).add_delegate("name", None).add_all(None)

    assert builder.comparators == []


def test_add_delegate(builder):
    """Test adding a custom comparator of field values."""
    builder.add_delegate("name", lambda a, b: len(a) - len(b))

    assert isinstance(builder.comparators[0], DelegatingComparator)
    assert builder.comparators[0].field == "name"


def test_add_all_skips_none(builder):
    """Test that add_all adds one comparator per sort order."""
    builder.add_all([SortOrder(field="name"), None, SortOrder(field="age")])

    assert [comparator.field for comparator in builder.comparators] == ["name", "age"]


def test_add_all_uses_value_extractor(builder):
    """Test that the value extractor is handed to every comparator."""
    extractor = DefaultValueExtractor(strict=False)

    builder.add_all(SortOrders.by(SortOrder(field="name"), SortOrder(field="age")), extractor)

    assert all(comparator.value_extractor is extractor for comparator in builder.comparators)


def test_add_all_with(builder):
    """Test that a function creates the comparators."""
    builder.add_all_with(
        [SortOrder(field="name"), None, SortOrder(field="age")],
        lambda sort_order: DelegatingComparator(sort_order.field, lambda a, b: 0),
    )

    assert [comparator.field for comparator in builder.comparators] == ["name", "age"]


def test_add_text(builder, records):
    """Test adding the sort orders of a text."""
    comparator = builder.add_text("name,ignorecase;age,desc").build()

    assert comparator.sort(records) == [records[1], records[2], records[0]]


def test_add_text_with_properties(builder):
    """Test adding the sort orders of a text with custom separators."""
    properties = SortOrdersTextProperties(sort_order_separator="|", sort_order_args_separator=":")

    builder.add_text("name:desc|age", properties)

    assert [comparator.sort_order for comparator in builder.comparators] == [
        SortOrder(field="name", direction=Direction.DESC),
        SortOrder(field="age"),
    ]


def test_build_returns_chain(builder, records):
    """Test that build creates a chain in insertion order."""
    chain = builder.add("name", ignore_case=True).add("age", asc=False).build()

    assert isinstance(chain, ComparatorChain)
    assert len(chain) == 2
    assert chain.sort(records) == [records[1], records[2], records[0]]


def test_build_is_not_affected_by_later_adds(builder):
    """Test that a built chain does not change when the builder does."""
    chain = builder.add("name").build()
    builder.add("age")

    assert len(chain) == 1


class TestBuildComparator:
    """Test cases for build_comparator."""

    def test_from_text(self):
        """Should sort descending with nulls first."""
        records = [{"age": 3}, {"age": None}, {"age": 5}]

        comparator = build_comparator("age,desc,,nullsfirst")

        assert comparator.sort(records) == [{"age": None}, {"age": 5}, {"age": 3}]

    def test_from_sort_order(self):
        """Should build a chain of one sort order."""
        comparator = build_comparator(SortOrder(field="age"))

        assert len(comparator) == 1

    def test_from_sort_orders(self):
        """Should build a chain of all sort orders."""
        comparator = build_comparator(SortOrders.by(SortOrder(field="age"), SortOrder(field="name")))

        assert len(comparator) == 2

    def test_from_empty_text(self):
        """Should build a no-op chain from an empty text."""
        comparator = build_comparator("")

        assert comparator.is_empty() is True
        assert comparator.sort([3, 1, 2]) == [3, 1, 2]

    def test_from_none(self):
        """Should build a no-op chain from None."""
        assert build_comparator(None).is_empty() is True
