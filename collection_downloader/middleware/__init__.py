"""
Middleware package for the collection downloader.
"""

from .auth_middleware import AccessGate, ApiKeyAuth
from .request_logging import RequestLoggingMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "AccessGate",
    "ApiKeyAuth",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
]
