# -*- coding: utf-8 -*-
"""Rate limiting configuration."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request


def get_rate_limit_key(request: Request) -> str:
    """Rate limit per acting user when known, per client IP otherwise."""
    user_id = request.headers.get("x-user-id")
    if user_id:
        return f"user:{user_id}"
    return get_remote_address(request)


limiter = Limiter(key_func=get_rate_limit_key)


class RateLimits:
    """Rate limit configurations for different endpoint types."""

    # Public reads and editor writes
    DEFAULT = "100/minute"

    # Admin writes (soft delete, restore, permanent delete)
    ADMIN_WRITE = "30/minute"

    # Bulk operations (emptying the recycle bin, manual job triggers)
    BULK = "5/minute"
