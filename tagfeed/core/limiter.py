"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from tagfeed.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _feed_limit() -> str:
    return get_settings().feed_rate_limit


limit_feed = limiter.limit(_feed_limit)
