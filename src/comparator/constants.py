"""Constants for the comparator package."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


# Logging settings
LOGGING_LEVEL = os.environ.get("LOGGING_LEVEL", "WARNING").upper()

# Value extractor settings
EXTRACTOR_STRICT = _as_bool(os.environ.get("COMPARATOR_EXTRACTOR_STRICT", "true"))
EXTRACTOR_CACHE_SIZE = int(os.environ.get("COMPARATOR_EXTRACTOR_CACHE_SIZE", "1024"))

# Sort order text settings
SORT_ORDER_SEPARATOR = os.environ.get("COMPARATOR_SORT_ORDER_SEPARATOR", ";")
SORT_ORDER_ARGS_SEPARATOR = os.environ.get("COMPARATOR_SORT_ORDER_ARGS_SEPARATOR", ",")
