"""Loguru sink configuration shared by the server and the launcher."""

import os

from loguru import logger

from . import config

_configured = False


def configure_logging() -> None:
    """Add the rotating application and error log files once per process."""
    global _configured
    if _configured:
        return

    os.makedirs(config.LOG_DIR, exist_ok=True)
    logger.add(
        os.path.join(config.LOG_DIR, "downloader.log"),
        rotation=config.LOG_ROTATION,
        retention=config.LOG_RETENTION,
        level=config.LOG_LEVEL,
    )
    logger.add(
        os.path.join(config.LOG_DIR, "errors.log"),
        rotation=config.LOG_ROTATION,
        retention=config.LOG_RETENTION,
        level="ERROR",
    )
    _configured = True
