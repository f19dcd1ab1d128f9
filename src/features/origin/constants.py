"""Constants for origin checks and trust-center response headers."""

# Wildcard token in configured origin patterns, standing for one DNS label
ORIGIN_WILDCARD = "*"
DNS_LABEL_PATTERN = "[^.]+"

# Hosts allowed as origins in development mode
LOCAL_DEVELOPMENT_HOSTS = frozenset({"localhost", "127.0.0.1"})

# Public trust-center routes
TRUST_CENTER_PREFIX = "/api/trust"
TRUST_CENTER_CSP = (
    "default-src 'self'; script-src 'self'; style-src 'self' 'unsafe-inline';"
)
CSP_HEADER = "Content-Security-Policy"

# CORS negotiation
CORS_EXPOSED_HEADERS: tuple[str, ...] = ("Content-Disposition",)
CORS_ALLOWED_METHODS: tuple[str, ...] = (
    "GET",
    "HEAD",
    "PUT",
    "PATCH",
    "POST",
    "DELETE",
)

# Log component name
COMPONENT_ORIGIN = "origin_guard"
