"""Configuration: reflection limit, CGI output directory and log level from environment."""

import logging
import os

from ellipse_billiard.constants import DEFAULT_MAX_REFLECTION_COUNT

logger = logging.getLogger(__name__)

DEFAULT_TEMP_PATH = '/var/www/work/'

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_max_reflection_count() -> int:
    """Return the largest accepted reflection count.

    Reads ELLIPSE_BILLIARD_MAX_REFLECTIONS; an unset, non-integer or negative
    value falls back to the demo's slider maximum.

    Returns:
        Non-negative integer bound.
    """
    raw = os.environ.get('ELLIPSE_BILLIARD_MAX_REFLECTIONS', '').strip()
    if not raw:
        return DEFAULT_MAX_REFLECTION_COUNT
    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            'Invalid ELLIPSE_BILLIARD_MAX_REFLECTIONS %r; using %d',
            raw,
            DEFAULT_MAX_REFLECTION_COUNT,
        )
        return DEFAULT_MAX_REFLECTION_COUNT
    if value < 0:
        logger.warning('Negative ELLIPSE_BILLIARD_MAX_REFLECTIONS %d; using 0', value)
        return 0
    return value


def get_temp_path() -> str:
    """Return output directory for CGI runs (ELLIPSE_BILLIARD_TEMP_PATH env var or default)."""
    return os.environ.get('ELLIPSE_BILLIARD_TEMP_PATH', DEFAULT_TEMP_PATH)


def get_log_level(default: int = logging.WARNING) -> int:
    """Return the logging level named by ELLIPSE_BILLIARD_LOG, or ``default``."""
    name = os.environ.get('ELLIPSE_BILLIARD_LOG', '').strip().upper()
    if name in _LOG_LEVELS:
        return int(getattr(logging, name))
    return default
