"""Sort order model."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from comparator.models.enums import CaseHandling, Direction, NullHandling
from comparator.models.text_properties import SortOrdersTextProperties


class SortOrder(BaseModel):
    """A sort order defines how a field of an object is sorted.

    An empty field means the objects themselves are compared.
    """

    model_config = {"frozen": True}

    field: str = Field(default="", description="The field name or dotted field path")
    direction: Direction = Field(default=Direction.ASC, description="Ascending or descending order")
    case_handling: CaseHandling = Field(default=CaseHandling.SENSITIVE, description="Case handling of string values")
    null_handling: NullHandling = Field(default=NullHandling.NULLS_LAST, description="Placement of null values")

    @field_validator("field", mode="before")
    @classmethod
    def _normalize_field(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def is_asc(self) -> bool:
        return self.direction.is_asc

    @property
    def is_ignore_case(self) -> bool:
        return self.case_handling.is_ignore_case

    @property
    def is_nulls_first(self) -> bool:
        return self.null_handling.is_nulls_first

    @classmethod
    def by(cls, field: Optional[str]) -> "SortOrder":
        """Create a sort order with default settings for the given field."""
        return cls(field=field)

    def with_direction(self, direction: Optional[Direction]) -> "SortOrder":
        if direction is None:
            return self
        return self.model_copy(update={"direction": Direction(direction)})

    def with_case_handling(self, case_handling: Optional[CaseHandling]) -> "SortOrder":
        if case_handling is None:
            return self
        return self.model_copy(update={"case_handling": CaseHandling(case_handling)})

    def with_null_handling(self, null_handling: Optional[NullHandling]) -> "SortOrder":
        if null_handling is None:
            return self
        return self.model_copy(update={"null_handling": NullHandling(null_handling)})

    def to_text(self, properties: Optional[SortOrdersTextProperties] = None) -> str:
        """Create the sort order text of this sort order, e.g. ``name,asc,sensitive,nullslast``."""
        from comparator.text_codec import format_sort_order

        return format_sort_order(self, properties)

    @classmethod
    def from_text(cls, source: Optional[str], properties: Optional[SortOrdersTextProperties] = None) -> "SortOrder":
        """Parse a sort order text."""
        from comparator.text_codec import parse_sort_order

        return parse_sort_order(source, properties)

    def __str__(self) -> str:
        return self.to_text()
