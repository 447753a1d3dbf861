"""
API routes package for the collection downloader.
This package contains API route modules that return JSON responses.
"""

from . import download

__all__ = ["download"]
