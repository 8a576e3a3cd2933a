"""
Runtime settings.

Values come from an optional top-level ``config.py`` (copy
``config.example.py`` and edit it); anything it does not define falls back
to the defaults below.
"""

import os

try:
    from config import BASE_URL, RELEASE_PATH, REQUEST_TIMEOUT, USER_AGENT
except ImportError:
    BASE_URL = 'https://subscene.com'
    RELEASE_PATH = 'subtitles/release'
    REQUEST_TIMEOUT = 15
    USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36'

# Import language filter configuration (with fallback)
try:
    from config import LANGUAGE_FILTER
except ImportError:
    LANGUAGE_FILTER = None

# Import logging configuration (with fallback)
try:
    from config import LOG_LEVEL, LOG_FILE
except ImportError:
    LOG_LEVEL = None
    LOG_FILE = None


def resolve_log_level(configured=None, environ=None):
    """A non-empty ``DEBUG`` environment variable forces DEBUG over any configured level."""
    environ = os.environ if environ is None else environ
    if environ.get('DEBUG'):
        return 'DEBUG'
    return configured or 'INFO'


LOG_LEVEL = resolve_log_level(LOG_LEVEL)
