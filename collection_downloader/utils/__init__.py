"""
Utils package for the collection downloader.
Contains utility functions and helpers.
"""

from .error_utils import api_error_response, render_error_page

__all__ = [
    "api_error_response",
    "render_error_page",
]
