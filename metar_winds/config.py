"""
Runtime configuration for metar_winds.

Values can be overridden with environment variables; command line
options take precedence over both.
"""

import os
import logging

logger = logging.getLogger(__name__)

# Station whose METAR reports are counted
DEFAULT_STATION = os.getenv("METAR_WINDS_STATION", "EGLL").strip().upper()

# Directory holding the bulletin files
DEFAULT_INPUT_DIR = os.getenv("METAR_WINDS_INPUT_DIR", "./metarfiles/")

# Logging
LOG_LEVEL = os.getenv("METAR_WINDS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Output formats understood by the command line
OUTPUT_FORMATS = ['human', 'json', 'csv']


def _default_max_workers() -> int:
    # Same default as ThreadPoolExecutor
    return min(32, (os.cpu_count() or 1) + 4)


def get_max_workers(value=None) -> int:
    """
    Resolve the worker count.

    Args:
        value: Explicit value (e.g. from the command line). When None the
               METAR_WINDS_MAX_WORKERS environment variable is used.

    Returns:
        A positive worker count. Invalid values fall back to the default.
    """
    if value is None:
        value = os.getenv("METAR_WINDS_MAX_WORKERS")
    if value is None or value == "":
        return _default_max_workers()
    try:
        workers = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid worker count {value!r}, using default")
        return _default_max_workers()
    if workers < 1:
        logger.warning(f"Worker count must be positive, got {workers}, using default")
        return _default_max_workers()
    return workers
