"""Default value extractor based on introspection."""

import inspect
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from comparator.config import settings
from comparator.exceptions import ExtractionError, ExtractionInvocationError
from comparator.extractors.base import FieldAccessible, ValueExtractor, split_field_path
from comparator.utils.logging import logger

_MISSING = object()


@dataclass(frozen=True)
class ClassAccessors:
    """Members of a class that can provide the value of one field."""

    getter: Optional[str]
    attributes: Tuple[str, ...]


def _is_getter(member: Any) -> bool:
    if not inspect.isfunction(member):
        return False
    parameters = list(inspect.signature(member).parameters.values())
    if not parameters or parameters[0].kind not in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
        return False
    parameters = parameters[1:]
    return all(
        parameter.default is not inspect.Parameter.empty
        or parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for parameter in parameters
    )


def resolve_class_accessors(owner: type, name: str) -> ClassAccessors:
    """Find the getter and the class level attributes of a field.

    Getters follow the ``get_<name>`` convention or the camel case
    ``get<Name>`` and ``is<Name>`` conventions. Attributes are looked up as
    ``<name>`` and ``_<name>``, including properties, slots and inherited
    class attributes.
    """
    capitalized = name[:1].upper() + name[1:]
    getter = None
    for candidate in (f"get_{name}", f"get{capitalized}", f"is{capitalized}"):
        if _is_getter(inspect.getattr_static(owner, candidate, None)):
            getter = candidate
            break
    attributes = tuple(
        attribute for attribute in (name, f"_{name}") if inspect.getattr_static(owner, attribute, _MISSING) is not _MISSING
    )
    return ClassAccessors(getter=getter, attributes=attributes)


class AccessorCache:
    """Bounded cache of class accessors keyed by (class, field name).

    Two threads may resolve the same key at the same time, both store an equal
    result.
    """

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._entries: Dict[Tuple[type, str], ClassAccessors] = {}
        self._lock = threading.Lock()

    def get(self, owner: type, name: str) -> ClassAccessors:
        key = (owner, name)
        with self._lock:
            accessors = self._entries.get(key)
        if accessors is not None:
            return accessors

        accessors = resolve_class_accessors(owner, name)
        logger.debug(f"Resolved accessors of field '{name}' on '{owner.__qualname__}': {accessors}")
        with self._lock:
            if self.max_size > 0:
                while len(self._entries) >= self.max_size:
                    del self._entries[next(iter(self._entries))]
                self._entries[key] = accessors
        return accessors

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


accessor_cache = AccessorCache(settings.extractor_cache_size)


class DefaultValueExtractor(ValueExtractor):
    """Value extractor that walks a field path with introspection.

    Each segment is resolved on the current value in this order: mapping key,
    ``FieldAccessible.get_field_value``, getter method, attribute (``<name>``
    before ``_<name>``). A None value in the middle of the path ends the walk
    with None.
    """

    def __init__(self, strict: Optional[bool] = None, cache: Optional[AccessorCache] = None) -> None:
        """Create a value extractor.

        Args:
            strict: Raise ExtractionError for missing fields, otherwise return None.
                Defaults to the configured ``extractor_strict`` setting.
            cache: Accessor cache, the shared one if None
        """
        self.strict = settings.extractor_strict if strict is None else strict
        self.cache = cache if cache is not None else accessor_cache

    def find_value(self, obj: Any, field_path: Optional[str]) -> Any:
        value = obj
        for segment in split_field_path(field_path):
            if value is None:
                return None
            value = self._find_segment_value(value, segment)
        return value

    def _find_segment_value(self, obj: Any, name: str) -> Any:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
            return self._missing(obj, name)

        if isinstance(obj, FieldAccessible):
            try:
                return obj.get_field_value(name)
            except LookupError:
                return self._missing(obj, name)
            except Exception as e:
                raise self._invocation_error(obj, name, e) from e

        accessors = self.cache.get(type(obj), name)
        if accessors.getter is not None:
            return self._read(obj, name, lambda: getattr(obj, accessors.getter)())

        instance_attributes = getattr(obj, "__dict__", None) or {}
        for attribute in (name, f"_{name}"):
            if attribute in instance_attributes or attribute in accessors.attributes:
                return self._read(obj, name, lambda: getattr(obj, attribute))

        # Objects with a custom __getattr__ only reveal their fields on access
        try:
            value = getattr(obj, name, _MISSING)
        except Exception as e:
            raise self._invocation_error(obj, name, e) from e
        if value is _MISSING:
            return self._missing(obj, name)
        return value

    def _read(self, obj: Any, name: str, reader) -> Any:
        try:
            return reader()
        except Exception as e:
            raise self._invocation_error(obj, name, e) from e

    def _missing(self, obj: Any, name: str) -> None:
        if not self.strict:
            return None
        cls_name = type(obj).__qualname__
        logger.debug(f"Field '{name}' was not found on '{cls_name}'")
        raise ExtractionError(cls_name, name)

    @staticmethod
    def _invocation_error(obj: Any, name: str, cause: Exception) -> ExtractionInvocationError:
        cls_name = type(obj).__qualname__
        logger.debug(f"Reading field '{name}' of '{cls_name}' failed: {cause!r}")
        return ExtractionInvocationError(cls_name, name, cause)
