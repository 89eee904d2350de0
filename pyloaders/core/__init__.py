"""
Core Layer - shared contracts.

This package contains:
- Configuration management (settings.py)
- Error types (errors.py)
- Data types produced by the bundled loaders (types.py)
"""

from pyloaders.core.errors import (
    LoaderError,
    LoaderInstantiationError,
    MissingExtensionError,
    SettingsError,
    UnsupportedExtensionError,
)
from pyloaders.core.types import Document, MarkdownDocument

__all__ = [
    "Document",
    "MarkdownDocument",
    "LoaderError",
    "LoaderInstantiationError",
    "MissingExtensionError",
    "SettingsError",
    "UnsupportedExtensionError",
]
