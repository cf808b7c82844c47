# studyhub/shared/middleware/rate_limiting_middleware.py

"""
Rate limiting (slowapi).

- `auth_rate_limit`: budget shared by login and register, per client IP.
- `GENERAL_RATE_LIMIT`: application-wide budget per client IP, enforced by
  `SlowAPIMiddleware` on every route without its own decorator.

Clients are keyed by the socket address (`get_remote_address`). Behind a reverse
proxy, uvicorn rewrites that address from X-Forwarded-For only for peers listed in
FORWARDED_ALLOW_IPS, so callers cannot pick their own key. Expired windows are
evicted by the storage backend.
"""

import logging
import math
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from studyhub.adapters.configuration.config import settings

logger = logging.getLogger(__name__)

AUTH_RATE_LIMIT = f"{settings.RATE_LIMIT_AUTH_REQUESTS}/{settings.RATE_LIMIT_WINDOW_SECONDS} seconds"
GENERAL_RATE_LIMIT = f"{settings.RATE_LIMIT_GENERAL_REQUESTS}/{settings.RATE_LIMIT_WINDOW_SECONDS} seconds"

limiter = Limiter(
    key_func=get_remote_address,
    application_limits=[GENERAL_RATE_LIMIT],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="moving-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)

auth_rate_limit = limiter.shared_limit(AUTH_RATE_LIMIT, scope="auth")


def _retry_after(request: Request, exc: RateLimitExceeded) -> int:
    current = getattr(request.state, "view_rate_limit", None)
    if current is None:
        return exc.limit.limit.get_expiry()

    item, keys = current
    reset_at, _ = request.app.state.limiter.limiter.get_window_stats(item, *keys)
    return max(1, math.ceil(reset_at - time.time()))


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Responde 429 no envelope de erro padrão, com Retry-After."""
    retry_after = _retry_after(request, exc)

    logger.warning(f"Rate limit exceeded: {get_remote_address(request)} on {request.url.path} ({exc.detail})")

    return JSONResponse(
        status_code=429,
        headers={"Retry-After": str(retry_after)},
        content={
            "success": False,
            "error": "Too many requests. Please try again later.",
            "code": "RATE_LIMIT_EXCEEDED",
            "details": {"retry_after": retry_after},
        },
    )


__all__ = [
    "AUTH_RATE_LIMIT",
    "GENERAL_RATE_LIMIT",
    "SlowAPIMiddleware",
    "auth_rate_limit",
    "limiter",
    "rate_limit_exceeded_handler",
]
