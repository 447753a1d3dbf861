"""
Configuration module for the collection downloader.
Centralizes all configuration settings and environment variables.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSEY_VALUES = {"0", "false", "no", "off"}


def require_env(name: str) -> str:
    """Return an environment variable, failing loudly when it is unset."""
    value = os.getenv(name)
    if value is None:
        raise RuntimeError(f"Environment variable '{name}' is required but not set.")
    return value


def parse_bool(name: str, raw_value: str) -> bool:
    """Strict boolean parsing; anything outside the known spellings is an error."""
    normalized = raw_value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSEY_VALUES:
        return False
    raise RuntimeError(
        f"Environment variable '{name}' must be one of: true/false, 1/0, yes/no, on/off"
    )


# Server configuration
PORT = int(os.getenv("PORT", "8000"))
DEV = parse_bool("DEV", os.getenv("DEV") or "false")
HOST = os.getenv("HOST", "0.0.0.0")

# Database configuration (no default: an unset URI is reported per request)
MONGODB_URI = os.getenv("MONGODB_URI")

# Shared secrets. Both are compared with plain equality.
API_KEY = os.getenv("API_KEY")
ACCESS_KEY = os.getenv("ACCESS_KEY") or os.getenv("NEXT_PUBLIC_ACCESS_KEY")
API_KEY_HEADER = "x-api-key"
ACCESS_KEY_PARAM = "key"

# Application settings
APP_TITLE = "MongoDB Collection Downloader"
APP_DESCRIPTION = "Download MongoDB collections securely"

# Logging settings
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_ROTATION = os.getenv("LOG_ROTATION", "1 day")
LOG_RETENTION = os.getenv("LOG_RETENTION", "7 days")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
REQUEST_LOGGING_ENABLED = parse_bool(
    "REQUEST_LOGGING_ENABLED", os.getenv("REQUEST_LOGGING_ENABLED") or "true"
)

# Template and static files live inside the package
PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = str(PACKAGE_DIR / "templates")
STATIC_DIR = str(PACKAGE_DIR / "static")
