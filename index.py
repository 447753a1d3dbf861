"""
Main entry point for the collection downloader.

PORT and DEV must be set explicitly here, unlike the defaults the app itself
falls back to.
"""

import os
import subprocess
from typing import Tuple

from loguru import logger

from collection_downloader.config import parse_bool, require_env


def launcher_settings() -> Tuple[int, bool]:
    """Read the required PORT and DEV values."""
    port = int(require_env("PORT"))
    dev = parse_bool("DEV", require_env("DEV"))
    return port, dev


def build_command(port: int, dev: bool) -> list[str]:
    """uvicorn invocation for the downloader app."""
    return [
        "uvicorn",
        "collection_downloader.server:app",
        *(["--reload"] if dev else []),
        "--host",
        os.getenv("HOST", "0.0.0.0"),
        "--port",
        str(port),
    ]


def main() -> None:
    port, dev = launcher_settings()
    # Normalize DEV for child processes that read the environment directly.
    os.environ["DEV"] = "true" if dev else "false"

    try:
        logger.info(f"Starting collection downloader on port {port} (dev={dev})")
        subprocess.run(build_command(port, dev), cwd=os.getcwd(), check=True)
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")
    except Exception as e:
        logger.error(f"An error occurred while starting the server: {e}")
        raise


if __name__ == "__main__":
    main()
