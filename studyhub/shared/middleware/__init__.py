# studyhub/shared/middleware/__init__.py (async version)

from studyhub.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware
from studyhub.shared.middleware.rate_limiting_middleware import SlowAPIMiddleware, limiter
from studyhub.shared.middleware.error_handler_middleware import ErrorHandlerMiddleware

# Export all for easy imports
__all__ = [
    "AsyncRequestLoggingMiddleware",
    "SlowAPIMiddleware",
    "ErrorHandlerMiddleware",
    "limiter",
]
