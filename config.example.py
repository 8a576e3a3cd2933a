"""
Example configuration file for the Subscene client
Copy this file to config.py and fill in your actual values
"""

# === Site Configuration ===
BASE_URL = 'https://subscene.com'
RELEASE_PATH = 'subtitles/release'

# === Request Configuration ===
REQUEST_TIMEOUT = 15  # Seconds before a request is abandoned
USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36'

# === Language Filter ===
# Comma separated site language ids, at most 3 (e.g. '13' for English,
# '13,38' for English + Spanish). None disables the filter.
# Ids can be found at https://subscene.com/filter
LANGUAGE_FILTER = None

# === Logging Configuration ===
LOG_LEVEL = 'INFO'  # Options: DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FILE = None  # e.g. 'logs/subscene.log'
