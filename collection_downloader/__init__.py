"""
Collection downloader: a key-gated form and API that export MongoDB collections as JSON.
"""

__version__ = "1.0.0"
