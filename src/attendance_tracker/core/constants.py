"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

API_PREFIX = "/api/v1"
API_VERSION = "1.0.0"

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
FILENAME_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

DEFAULT_DB_POOL_SIZE = 10
DEFAULT_DB_POOL_TIMEOUT = 30.0
MAX_DB_POOL_SIZE = 32
DEFAULT_EXPORT_DIR = "exports"

# Browser clients (the admin front-end) call the API from another origin.
CORS_ORIGINS = "*"
CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Origin", "Content-Type", "Accept", "Authorization"]
