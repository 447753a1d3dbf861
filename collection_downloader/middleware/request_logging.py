"""
Request logging middleware for the collection downloader.
Writes one access line per request and a warning for error responses.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from loguru import logger

from .. import config


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, client and user agent. Query strings are left out."""

    async def dispatch(self, request: Request, call_next):
        user_agent = request.headers.get("user-agent", "unknown")
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        # The path only; the query string may carry the access key
        path = request.url.path

        if config.REQUEST_LOGGING_ENABLED:
            logger.info(
                f"Request: {method} {path} | Client: {client_ip} | User-Agent: {user_agent}"
            )

        response: Response = await call_next(request)

        if 400 <= response.status_code < 600:
            logger.warning(
                f"Response: {response.status_code} {method} {path} | Client: {client_ip}"
            )

        return response
