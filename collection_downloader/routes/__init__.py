"""
Routes package for the collection downloader.
"""

from .api import download as api_download
from .web import form

__all__ = ["api_download", "form"]
