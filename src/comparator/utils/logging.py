"""Package logger, written to stdout at the level named by ``COMPARATOR_LOGGING_LEVEL``."""

import logging
import sys

from comparator.constants import LOGGING_LEVEL

logger = logging.getLogger("comparator")

# Unknown level names fall back to WARNING
logging_level = getattr(logging, LOGGING_LEVEL, logging.WARNING)

logger.setLevel(logging_level)

# Comparators are often shared between threads, so records carry both ids
formatter = logging.Formatter("%(asctime)s - PID:%(process)d - Thread:%(thread)d - %(name)s - %(levelname)s - %(message)s")

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)

# Records stop here, an application's root handlers would print them twice
logger.propagate = False
