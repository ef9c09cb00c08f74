"""Value extractors resolve field paths on arbitrary objects."""

from comparator.extractors.base import FieldAccessible, ValueExtractor, split_field_path
from comparator.extractors.default import AccessorCache, DefaultValueExtractor

__all__ = [
    "AccessorCache",
    "DefaultValueExtractor",
    "FieldAccessible",
    "ValueExtractor",
    "split_field_path",
]
