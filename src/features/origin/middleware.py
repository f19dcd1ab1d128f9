"""Starlette middleware for the HTTP boundary.

GuardedCORSMiddleware runs Starlette's CORS negotiation with the origin
decision delegated to an OriginAccessGuard. TrustCenterCSPMiddleware
adds the restrictive Content-Security-Policy to trust-center routes.
"""

from collections.abc import Sequence

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.features.origin.constants import (
    COMPONENT_ORIGIN,
    CORS_ALLOWED_METHODS,
    CORS_EXPOSED_HEADERS,
    CSP_HEADER,
    TRUST_CENTER_CSP,
    TRUST_CENTER_PREFIX,
)
from src.features.origin.guard import OriginAccessGuard
from src.features.redaction.logger import SanitizingLogger


def is_under_prefix(path: str, prefix: str) -> bool:
    """Check if a request path is the prefix itself or below it.

    Args:
        path: Request path.
        prefix: Route prefix without trailing slash.

    Returns:
        True for "/api/trust" and "/api/trust/...", False for
        "/api/trustees".
    """
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


class GuardedCORSMiddleware(CORSMiddleware):
    """CORS middleware whose allowed origins come from an OriginAccessGuard.

    Permitted origins may send credentialed requests (cookies) unless
    allow_credentials is turned off.
    """

    def __init__(
        self,
        app: ASGIApp,
        guard: OriginAccessGuard,
        logger: SanitizingLogger | None = None,
        allow_methods: Sequence[str] = CORS_ALLOWED_METHODS,
        allow_headers: Sequence[str] = ("*",),
        expose_headers: Sequence[str] = CORS_EXPOSED_HEADERS,
        allow_credentials: bool = True,
        max_age: int = 600,
    ) -> None:
        super().__init__(
            app,
            allow_origins=(),
            allow_methods=allow_methods,
            allow_headers=allow_headers,
            allow_credentials=allow_credentials,
            expose_headers=expose_headers,
            max_age=max_age,
        )
        self.guard = guard
        self._log = logger

    def is_allowed_origin(self, origin: str) -> bool:
        allowed = self.guard.is_allowed(origin)
        if not allowed and self._log is not None:
            self._log.debug(
                "Origin not allowed by CORS",
                {"component": COMPONENT_ORIGIN, "origin": origin},
            )
        return allowed


class TrustCenterCSPMiddleware(BaseHTTPMiddleware):
    """Attach a restrictive Content-Security-Policy to trust-center routes."""

    def __init__(
        self,
        app: ASGIApp,
        prefix: str = TRUST_CENTER_PREFIX,
        policy: str = TRUST_CENTER_CSP,
    ) -> None:
        super().__init__(app)
        self.prefix = prefix
        self.policy = policy

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        if is_under_prefix(request.url.path, self.prefix):
            response.headers[CSP_HEADER] = self.policy
        return response
