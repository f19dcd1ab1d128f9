"""Constants for log redaction."""

# Metadata keys are lower-cased before being checked against these entries.
# Mixed-case entries therefore never match on their own (see DESIGN.md).
SENSITIVE_FIELDS: tuple[str, ...] = (
    "password",
    "passwordHash",
    "token",
    "accessToken",
    "refreshToken",
    "authorization",
    "secret",
    "apiKey",
    "apiSecret",
    "clientSecret",
    "jwtSecret",
    "privateKey",
)

REDACTED_VALUE = "[REDACTED]"

# Recursion bound for nested metadata
MAX_DEPTH = 10
MAX_DEPTH_PLACEHOLDER = "[Max depth reached]"

# Long string truncation
MAX_STRING_LENGTH = 1000
TRUNCATION_MARKER = "...[truncated]"
