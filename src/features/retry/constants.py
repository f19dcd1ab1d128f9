"""Constants for the database retry layer."""

# Defaults for RetryOptions
DEFAULT_MAX_RETRIES = 3
DEFAULT_INITIAL_DELAY_MS = 100
DEFAULT_MAX_DELAY_MS = 2000
DEFAULT_BACKOFF_MULTIPLIER = 2.0

# Lower-cased substrings that mark a failure as transient
TRANSIENT_ERROR_PATTERNS: tuple[str, ...] = (
    "connectionerror",
    "timed out",
    "timeout",
    "connection",
    "connectorerror",
    "econnreset",
    "econnrefused",
)

# Log component name
COMPONENT_DB_RETRY = "db_retry"
