"""Configured origin patterns: literal origins and single-label wildcards."""

import re
from dataclasses import dataclass, field

from src.features.origin.constants import DNS_LABEL_PATTERN, ORIGIN_WILDCARD


def compile_origin_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a wildcard origin pattern into a regex.

    Every regex metacharacter is escaped first, so "." only matches a
    literal dot; each "*" then becomes one DNS label.

    Args:
        pattern: Origin pattern, e.g. "https://trust.*.paythru.com".

    Returns:
        Compiled regex, to be used with fullmatch().
    """
    escaped = re.escape(pattern)
    return re.compile(escaped.replace(re.escape(ORIGIN_WILDCARD), DNS_LABEL_PATTERN))


def parse_origin_list(value: str | None) -> list[str]:
    """Split a comma-separated origin list.

    Args:
        value: Raw configuration value, e.g. from CORS_TRUST_CENTER_ORIGINS.

    Returns:
        Trimmed, non-empty entries in their configured order.
    """
    if not value:
        return []
    return [entry.strip() for entry in value.split(",") if entry.strip()]


@dataclass(frozen=True)
class OriginPattern:
    """An allow-list entry for cross-origin requests.

    Attributes:
        value: The configured string, a literal origin
            (scheme://host[:port]) or a pattern containing "*".
    """

    value: str
    _regex: re.Pattern[str] | None = field(
        init=False, repr=False, compare=False, default=None
    )

    def __post_init__(self) -> None:
        if self.is_wildcard:
            object.__setattr__(self, "_regex", compile_origin_pattern(self.value))

    @property
    def is_wildcard(self) -> bool:
        """Whether the pattern contains a wildcard label."""
        return ORIGIN_WILDCARD in self.value

    def matches(self, origin: str) -> bool:
        """Check if a request origin matches this pattern.

        Args:
            origin: Value of the request's Origin header.

        Returns:
            True on exact equality for literal patterns, or on a full
            regex match for wildcard patterns.
        """
        if self._regex is None:
            return origin == self.value
        return self._regex.fullmatch(origin) is not None
