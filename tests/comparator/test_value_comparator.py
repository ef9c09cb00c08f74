"""Tests for the value comparator."""

import math

import pytest

from comparator.comparators import ValueComparator
from comparator.exceptions import ComparisonTypeError, ExtractionError
from comparator.extractors import DefaultValueExtractor
from comparator.models import CaseHandling, Direction, NullHandling, SortOrder


def comparator_for(field="", **settings):
    return ValueComparator(SortOrder(field=field, **settings))


def test_compare_ascending():
    """Test ascending comparison of field values."""
    comparator = comparator_for("age")

    assert comparator.compare({"age": 3}, {"age": 5}) == -1
    assert comparator.compare({"age": 5}, {"age": 3}) == 1
    assert comparator.compare({"age": 5}, {"age": 5}) == 0


def test_compare_descending():
    """Test that descending order negates the result."""
    comparator = comparator_for("age", direction=Direction.DESC)

    assert comparator.compare({"age": 3}, {"age": 5}) == 1
    assert comparator.compare({"age": 5}, {"age": 3}) == -1


def test_comparator_is_callable():
    """Test that a comparator can be called like a function."""
    comparator = comparator_for("age")

    assert comparator({"age": 1}, {"age": 2}) == -1


def test_compare_without_field():
    """Test that an empty field compares the objects themselves."""
    assert comparator_for().compare(1, 2) == -1
    assert comparator_for(direction=Direction.DESC).compare(1, 2) == 1
    assert comparator_for().compare("b", "a") == 1


def test_both_values_none():
    """Test that two None values are equal."""
    assert comparator_for("age").compare({"age": None}, {"age": None}) == 0
    assert comparator_for().compare(None, None) == 0


@pytest.mark.parametrize("direction", list(Direction))
def test_nulls_last_regardless_of_direction(direction):
    """Test that nulls last puts None after values in both directions."""
    comparator = comparator_for("age", direction=direction, null_handling=NullHandling.NULLS_LAST)

    assert comparator.compare({"age": None}, {"age": 1}) == 1
    assert comparator.compare({"age": 1}, {"age": None}) == -1


@pytest.mark.parametrize("direction", list(Direction))
def test_nulls_first_regardless_of_direction(direction):
    """Test that nulls first puts None before values in both directions."""
    comparator = comparator_for("age", direction=direction, null_handling=NullHandling.NULLS_FIRST)

    assert comparator.compare({"age": None}, {"age": 1}) == -1
    assert comparator.compare({"age": 1}, {"age": None}) == 1


def test_case_insensitive_strings():
    """Test that case is ignored for strings when configured."""
    comparator = comparator_for("name", case_handling=CaseHandling.INSENSITIVE)

    assert comparator.compare({"name": "Bob"}, {"name": "bob"}) == 0
    assert comparator.compare({"name": "alice"}, {"name": "Bob"}) == -1
    assert comparator.compare({"name": "STRASSE"}, {"name": "straße"}) == 0


def test_case_sensitive_strings():
    """Test that case matters for strings by default."""
    comparator = comparator_for("name")

    assert comparator.compare({"name": "Bob"}, {"name": "bob"}) != 0
    assert comparator.compare({"name": "Bob"}, {"name": "bob"}) == -1


def test_case_handling_ignored_for_non_strings():
    """Test that case handling does not affect other types."""
    comparator = comparator_for("n", case_handling=CaseHandling.INSENSITIVE)

    assert comparator.compare({"n": 2}, {"n": 10}) == -1


def test_incomparable_values():
    """Test that values without a common ordering raise an error naming the field and types."""
    comparator = comparator_for("value")

    with pytest.raises(ComparisonTypeError) as exc:
        comparator.compare({"value": 1}, {"value": "a"})

    assert exc.value.field_name == "value"
    assert exc.value.left_type == "int"
    assert exc.value.right_type == "str"
    assert "value" in str(exc.value)


def test_unordered_objects():
    """Test that objects without ordering raise an error."""
    with pytest.raises(ComparisonTypeError) as exc:
        comparator_for().compare(object(), object())

    assert exc.value.left_type == "object"


def test_missing_field_propagates():
    """Test that extraction errors reach the caller."""
    with pytest.raises(ExtractionError):
        comparator_for("name").compare({"name": "a"}, {"age": 1})


def test_custom_value_extractor():
    """Test that a given value extractor is used."""
    extractor = DefaultValueExtractor(strict=False)
    comparator = ValueComparator(SortOrder(field="name"), extractor)

    assert comparator.value_extractor is extractor
    assert comparator.compare({"name": "a"}, {"age": 1}) == -1


def test_sorting_scenario():
    """Test descending numeric order with nulls first."""
    records = [{"age": None}, {"age": 5}, {"age": 3}]
    comparator = ValueComparator(SortOrder.from_text("age,desc,,nullsfirst"))

    assert comparator.sort(reversed(records)) == records


def test_nan_sorted_like_null_last():
    """Test that NaN goes after numbers when nulls are last."""
    comparator = comparator_for(null_handling=NullHandling.NULLS_LAST)

    result = comparator.sort([3.0, float("nan"), 1.0, 2.0])

    assert result[:3] == [1.0, 2.0, 3.0]
    assert math.isnan(result[3])


def test_nan_sorted_like_null_first():
    """Test that NaN goes before numbers when nulls are first, also in descending order."""
    comparator = comparator_for(direction=Direction.DESC, null_handling=NullHandling.NULLS_FIRST)

    result = comparator.sort([3.0, float("nan"), 1.0, None, 2.0])

    assert math.isnan(result[0])
    assert result[1] is None
    assert result[2:] == [3.0, 2.0, 1.0]
    assert comparator.compare(float("nan"), None) == 0
