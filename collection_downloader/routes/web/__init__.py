"""
Web routes package for the collection downloader.
This package contains web route modules that return HTML template responses.
"""

from . import form

__all__ = ["form"]
