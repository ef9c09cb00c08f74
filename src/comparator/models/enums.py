"""Enumerations used by sort order models."""

from enum import Enum


class Direction(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @property
    def is_asc(self) -> bool:
        return self is Direction.ASC


class CaseHandling(str, Enum):
    """Case handling of string values."""

    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"

    @property
    def is_ignore_case(self) -> bool:
        return self is CaseHandling.INSENSITIVE


class NullHandling(str, Enum):
    """Placement of null values, independent of the sort direction."""

    NULLS_FIRST = "nulls_first"
    NULLS_LAST = "nulls_last"

    @property
    def is_nulls_first(self) -> bool:
        return self is NullHandling.NULLS_FIRST
