"""Comparator settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from comparator.constants import (
    EXTRACTOR_CACHE_SIZE,
    EXTRACTOR_STRICT,
    LOGGING_LEVEL,
    SORT_ORDER_ARGS_SEPARATOR,
    SORT_ORDER_SEPARATOR,
)
from comparator.models.text_properties import SortOrdersTextProperties


class Settings(BaseSettings):
    """Comparator settings, read from ``COMPARATOR_*`` environment variables.

    The separators only take effect through ``text_properties()``. The text
    codec and ``SortOrders.from_text`` called without properties always use
    ``SortOrdersTextProperties.defaults()``, pass ``settings.text_properties()``
    to parse with the configured separators.
    """

    model_config = SettingsConfigDict(env_prefix="COMPARATOR_")

    # Logging
    logging_level: str = LOGGING_LEVEL

    # Value extractor
    extractor_strict: bool = EXTRACTOR_STRICT
    extractor_cache_size: int = EXTRACTOR_CACHE_SIZE

    # Sort order text
    sort_order_separator: str = SORT_ORDER_SEPARATOR
    sort_order_args_separator: str = SORT_ORDER_ARGS_SEPARATOR

    def text_properties(self) -> SortOrdersTextProperties:
        """Build text properties with the configured separators and the default tokens."""
        return SortOrdersTextProperties.defaults().with_values(
            sort_order_separator=self.sort_order_separator,
            sort_order_args_separator=self.sort_order_args_separator,
        )


settings = Settings()
