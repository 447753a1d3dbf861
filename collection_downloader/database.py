"""
MongoDB connection handling for the collection downloader.

Every export opens its own client and closes it before the request returns.
There is no pool shared between requests.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable

from loguru import logger
from pymongo import AsyncMongoClient

# Swapped out in tests for an in-memory fake with the same surface.
client_factory: Callable[[str], Any] = AsyncMongoClient


@asynccontextmanager
async def open_connection(uri: str) -> AsyncIterator[Any]:
    """Yield a connected client that is closed exactly once on every exit path."""
    client = client_factory(uri)
    try:
        await client.aconnect()
        logger.debug("MongoDB client connected")
        yield client
    finally:
        await client.close()
        logger.debug("MongoDB client closed")


__all__ = ["client_factory", "open_connection"]
