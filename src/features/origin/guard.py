"""Origin allow-list checks for cross-origin requests."""

from collections.abc import Iterable
from urllib.parse import urlparse

from src.features.origin.constants import LOCAL_DEVELOPMENT_HOSTS
from src.features.origin.patterns import OriginPattern


def is_local_development_origin(origin: str) -> bool:
    """Check if an origin points at the local machine.

    Args:
        origin: Value of the request's Origin header.

    Returns:
        True if the origin's host is localhost or 127.0.0.1.
    """
    try:
        hostname = urlparse(origin).hostname
    except ValueError:
        return False
    return hostname in LOCAL_DEVELOPMENT_HOSTS


class OriginAccessGuard:
    """Decides whether a request origin may read cross-origin responses.

    Patterns are fixed at construction and only read afterwards, so one
    guard can be consulted by concurrent requests without locking.
    """

    def __init__(
        self,
        patterns: Iterable[str | OriginPattern],
        allow_local_development: bool = False,
    ) -> None:
        """Initialize the guard.

        Args:
            patterns: Allowed origins, literal or wildcard, in priority order.
            allow_local_development: Also allow localhost origins.
        """
        self._patterns: tuple[OriginPattern, ...] = tuple(
            p if isinstance(p, OriginPattern) else OriginPattern(p) for p in patterns
        )
        self._allow_local_development = allow_local_development

    @property
    def patterns(self) -> tuple[OriginPattern, ...]:
        """Configured patterns in order."""
        return self._patterns

    @property
    def allow_local_development(self) -> bool:
        """Whether localhost origins are allowed."""
        return self._allow_local_development

    def matching_pattern(self, origin: str) -> OriginPattern | None:
        """Find the first configured pattern matching an origin.

        Args:
            origin: Value of the request's Origin header.

        Returns:
            The matching pattern, or None.
        """
        for pattern in self._patterns:
            if pattern.matches(origin):
                return pattern
        return None

    def is_allowed(self, origin: str | None) -> bool:
        """Check if a request origin is allowed.

        Requests without an Origin header (same-origin navigation, curl,
        server-to-server) are always allowed.

        Args:
            origin: Value of the request's Origin header, if any.

        Returns:
            True if the origin is allowed.
        """
        if not origin:
            return True

        if self._allow_local_development and is_local_development_origin(origin):
            return True

        return self.matching_pattern(origin) is not None
