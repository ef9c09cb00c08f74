"""Custom exceptions for the comparator package."""

from typing import Optional


class ComparatorError(Exception):
    """Base exception for comparator errors."""

    pass


class ExtractionError(ComparatorError):
    """Raised when a field of a field path cannot be found on an object."""

    def __init__(self, cls_name: str, field_name: str, message: Optional[str] = None):
        self.cls_name = cls_name
        self.field_name = field_name
        super().__init__(message or f"Field '{field_name}' was not found on object of type '{cls_name}'")


class ExtractionInvocationError(ExtractionError):
    """Raised when reading a found field or getter fails."""

    def __init__(self, cls_name: str, field_name: str, cause: BaseException):
        self.cause = cause
        super().__init__(
            cls_name,
            field_name,
            f"Reading field '{field_name}' of object of type '{cls_name}' failed: {cause!r}",
        )


class ComparisonTypeError(ComparatorError):
    """Raised when two field values cannot be compared with each other."""

    def __init__(self, field_name: str, left_type: str, right_type: str):
        self.field_name = field_name
        self.left_type = left_type
        self.right_type = right_type
        super().__init__(f"Values of field '{field_name}' are not comparable: '{left_type}' and '{right_type}'")


class ConfigurationError(ComparatorError):
    """Raised when the sort orders text properties are malformed."""

    pass
