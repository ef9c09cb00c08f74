"""Token vocabulary of the sort order text format."""

from itertools import combinations
from typing import Optional, Set, Tuple

from pydantic import BaseModel, Field, model_validator

from comparator.exceptions import ConfigurationError
from comparator.models.enums import CaseHandling, Direction, NullHandling

TOKEN_SETS = (
    "asc_values",
    "desc_values",
    "case_insensitive_values",
    "case_sensitive_values",
    "nulls_first_values",
    "nulls_last_values",
)


class SortOrdersTextProperties(BaseModel):
    """Separators and tokens used to parse and format sort order texts.

    The first value of every token list is the canonical token written by the
    formatter, all values are accepted by the parser (case-insensitive). Token
    sets must be disjoint, otherwise a token could stand for two settings.

    Example with the defaults::

        name,asc,ignorecase;age,desc,sensitive,nullsfirst
    """

    model_config = {"frozen": True}

    sort_order_separator: str = Field(default=";", description="Separator between sort orders")
    sort_order_args_separator: str = Field(default=",", description="Separator between the args of a sort order")
    asc_values: Tuple[str, ...] = ("asc", "ascending")
    desc_values: Tuple[str, ...] = ("desc", "descending")
    case_insensitive_values: Tuple[str, ...] = ("ignorecase", "insensitive", "i")
    case_sensitive_values: Tuple[str, ...] = ("sensitive", "casesensitive", "s")
    nulls_first_values: Tuple[str, ...] = ("nullsfirst", "nulls_first", "first")
    nulls_last_values: Tuple[str, ...] = ("nullslast", "nulls_last", "last")

    @model_validator(mode="after")
    def _check_vocabulary(self) -> "SortOrdersTextProperties":
        separators = (self.sort_order_separator, self.sort_order_args_separator)
        if not all(separators):
            raise ConfigurationError("Sort order separators must not be empty")
        if self.sort_order_separator == self.sort_order_args_separator:
            raise ConfigurationError(f"Sort order separator and args separator must differ, both are '{self.sort_order_separator}'")

        for name in TOKEN_SETS:
            values = getattr(self, name)
            if not values:
                raise ConfigurationError(f"Token list '{name}' must not be empty")
            for value in values:
                if not value.strip():
                    raise ConfigurationError(f"Token list '{name}' contains a blank token")
                if any(separator in value for separator in separators):
                    raise ConfigurationError(f"Token '{value}' of '{name}' contains a separator")

        for left, right in combinations(TOKEN_SETS, 2):
            shared = self._normalized(left) & self._normalized(right)
            if shared:
                raise ConfigurationError(f"Token sets '{left}' and '{right}' overlap: {sorted(shared)}")
        return self

    def _normalized(self, name: str) -> Set[str]:
        return {value.strip().lower() for value in getattr(self, name)}

    @classmethod
    def defaults(cls) -> "SortOrdersTextProperties":
        """Return the shared default instance."""
        return _DEFAULTS

    def with_values(self, **changes) -> "SortOrdersTextProperties":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return type(self)(**data)

    @staticmethod
    def _matches(token: Optional[str], values: Tuple[str, ...]) -> bool:
        if token is None:
            return False
        token = token.strip().lower()
        return any(token == value.strip().lower() for value in values)

    def direction_of(self, token: Optional[str]) -> Optional[Direction]:
        """Return the direction a token stands for, None if it is no direction token."""
        if self._matches(token, self.asc_values):
            return Direction.ASC
        if self._matches(token, self.desc_values):
            return Direction.DESC
        return None

    def case_handling_of(self, token: Optional[str]) -> Optional[CaseHandling]:
        """Return the case handling a token stands for, None if it is no case token."""
        if self._matches(token, self.case_insensitive_values):
            return CaseHandling.INSENSITIVE
        if self._matches(token, self.case_sensitive_values):
            return CaseHandling.SENSITIVE
        return None

    def null_handling_of(self, token: Optional[str]) -> Optional[NullHandling]:
        """Return the null handling a token stands for, None if it is no null token."""
        if self._matches(token, self.nulls_first_values):
            return NullHandling.NULLS_FIRST
        if self._matches(token, self.nulls_last_values):
            return NullHandling.NULLS_LAST
        return None

    def direction_value(self, direction: Direction) -> str:
        return self.asc_values[0] if direction.is_asc else self.desc_values[0]

    def case_handling_value(self, case_handling: CaseHandling) -> str:
        return self.case_insensitive_values[0] if case_handling.is_ignore_case else self.case_sensitive_values[0]

    def null_handling_value(self, null_handling: NullHandling) -> str:
        return self.nulls_first_values[0] if null_handling.is_nulls_first else self.nulls_last_values[0]


_DEFAULTS = SortOrdersTextProperties()
