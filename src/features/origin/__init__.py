"""Origin access guard for the HTTP boundary.

This module provides:
- Literal and single-label wildcard origin patterns
- An allow-list guard consulted per request for CORS
- Starlette middleware for CORS negotiation and the trust-center CSP
"""

from src.features.origin.constants import (
    CORS_ALLOWED_METHODS,
    CORS_EXPOSED_HEADERS,
    CSP_HEADER,
    TRUST_CENTER_CSP,
    TRUST_CENTER_PREFIX,
)
from src.features.origin.guard import OriginAccessGuard, is_local_development_origin
from src.features.origin.middleware import (
    GuardedCORSMiddleware,
    TrustCenterCSPMiddleware,
    is_under_prefix,
)
from src.features.origin.patterns import (
    OriginPattern,
    compile_origin_pattern,
    parse_origin_list,
)


__all__ = [
    # Guard
    "OriginAccessGuard",
    "OriginPattern",
    "compile_origin_pattern",
    "is_local_development_origin",
    "parse_origin_list",
    # Middleware
    "GuardedCORSMiddleware",
    "TrustCenterCSPMiddleware",
    "is_under_prefix",
    # Constants
    "CORS_ALLOWED_METHODS",
    "CORS_EXPOSED_HEADERS",
    "CSP_HEADER",
    "TRUST_CENTER_CSP",
    "TRUST_CENTER_PREFIX",
]
