"""Rate limiter built from the rateLimit section.

One default limit applies to every route, keyed by client address, kept
in process memory.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from portal.infrastructure.config.schema import RateLimitConfig


def rate_limit_string(rate_limit: RateLimitConfig) -> str:
    """Return the limits-library string, e.g. '100/15 minutes'."""
    unit = "minute" if rate_limit.minutes == 1 else "minutes"
    return f"{rate_limit.requests}/{rate_limit.minutes} {unit}"


def create_limiter(rate_limit: RateLimitConfig) -> Limiter:
    """Build the application Limiter with a single default limit.

    Args:
        rate_limit: Validated rateLimit section.

    Returns:
        Limiter to set on app.state.limiter (used by SlowAPIMiddleware).
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[rate_limit_string(rate_limit)],
        headers_enabled=True,
    )
