"""
Services package for the collection downloader.
Contains business logic layer for the application.
"""

from .export_service import (
    ExportConfigurationError,
    ExportError,
    ExportService,
    ExportUpstreamError,
)

__all__ = [
    "ExportService",
    "ExportError",
    "ExportConfigurationError",
    "ExportUpstreamError",
]
