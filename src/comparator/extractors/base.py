"""Base classes for value extraction."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class FieldAccessible(Protocol):
    """Objects that expose their field values explicitly.

    ``get_field_value`` raises ``LookupError`` (e.g. ``KeyError``) if the
    object has no field with the given name.
    """

    def get_field_value(self, name: str) -> Any: ...


class ValueExtractor(ABC):
    """Base class for value extractors."""

    @abstractmethod
    def find_value(self, obj: Any, field_path: Optional[str]) -> Any:
        """Find the value of a field path.

        Args:
            obj: Object to read the value from
            field_path: Dot-delimited field path, e.g. ``address.city``

        Returns:
            The value; the object itself if the field path is empty; None if an
            intermediate value is None

        Raises:
            ExtractionError: If a field of the path cannot be found
            ExtractionInvocationError: If reading a field fails
        """
        pass


def split_field_path(field_path: Optional[str]) -> List[str]:
    """Split a field path into its segments, ignoring blanks and surplus dots."""
    if not field_path:
        return []
    return [segment.strip() for segment in field_path.split(".") if segment.strip()]
