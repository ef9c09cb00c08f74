"""Tests for the comparator chain and the delegating comparator."""

import pytest

from comparator.comparators import ComparatorChain, DelegatingComparator, ValueComparator
from comparator.models import Direction, SortOrder


@pytest.fixture
def people():
    return [
        {"last_name": "Smith", "first_name": "Zoe", "age": 30},
        {"last_name": "Doe", "first_name": "John", "age": 40},
        {"last_name": "Smith", "first_name": "Anna", "age": 30},
    ]


def test_tie_break_order(people):
    """Test that later comparators decide when earlier ones are equal."""
    chain = ComparatorChain(
        [
            ValueComparator(SortOrder(field="last_name")),
            ValueComparator(SortOrder(field="first_name")),
        ]
    )

    result = chain.sort(people)

    assert [person["first_name"] for person in result] == ["John", "Anna", "Zoe"]


def test_first_non_zero_result_wins(people):
    """Test that the chain stops at the first comparator with a decision."""
    calls = []

    def recording(a, b):
        calls.append((a, b))
        return 0

    chain = ComparatorChain([ValueComparator(SortOrder(field="age", direction=Direction.DESC)), recording])

    assert chain.compare(people[0], people[1]) == 1
    assert calls == []
    assert chain.compare(people[0], people[2]) == 0
    assert calls == [(people[0], people[2])]


def test_empty_chain_keeps_order(people):
    """Test that an empty chain is a no-op ordering."""
    chain = ComparatorChain()

    assert chain.is_empty() is True
    assert len(chain) == 0
    assert chain.compare(people[0], people[1]) == 0
    assert chain.sort(people) == people


def test_key_function(people):
    """Test that the chain works with list.sort."""
    chain = ComparatorChain([ValueComparator(SortOrder(field="age"))])

    people.sort(key=chain.key())

    assert [person["age"] for person in people] == [30, 30, 40]
    assert people[0]["first_name"] == "Zoe"


class TestDelegatingComparator:
    """Test cases for DelegatingComparator."""

    def test_delegates_field_values(self, people):
        """Should hand the extracted values to the custom comparator."""
        by_length = DelegatingComparator("first_name", lambda a, b: len(a) - len(b))

        assert by_length.compare(people[0], people[1]) < 0
        assert by_length.compare(people[1], people[2]) == 0

    def test_empty_field_delegates_objects(self):
        """Should hand the objects themselves to the custom comparator."""
        comparator = DelegatingComparator(None, lambda a, b: b - a)

        assert comparator.compare(1, 2) == 1

    def test_requires_comparator(self):
        """Should reject a missing comparator."""
        with pytest.raises(ValueError):
            DelegatingComparator("name", None)
