"""
Secret checks for the collection downloader.
Handles the API key header on the export endpoint and the page access key.

Both checks are plain equality against a static configured value: there is no
hashing, expiry, rotation or rate limiting.
"""

from typing import Optional

from fastapi import HTTPException, Request
from loguru import logger

from .. import config

UNAUTHORIZED_DETAIL = "Unauthorized: Invalid API key"


def _matches(candidate: Optional[str], secret: Optional[str]) -> bool:
    """True only when both values are non-empty and identical."""
    if not candidate or not secret:
        return False
    return candidate == secret


class ApiKeyAuth:
    """Authorization for the export endpoint."""

    @staticmethod
    def is_valid_api_key(candidate: Optional[str]) -> bool:
        return _matches(candidate, config.API_KEY)

    @staticmethod
    def require_api_key(request: Request) -> None:
        """
        Require a valid API key header for a request.

        Args:
            request: FastAPI request object

        Raises:
            HTTPException: If the header is missing or does not match
        """
        if not config.API_KEY:
            logger.warning("API_KEY is not configured; rejecting export request")
        if not ApiKeyAuth.is_valid_api_key(request.headers.get(config.API_KEY_HEADER)):
            raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL)


class AccessGate:
    """Visibility check for the download form."""

    @staticmethod
    def is_authorized(key: Optional[str]) -> bool:
        return _matches(key, config.ACCESS_KEY)
