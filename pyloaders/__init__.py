"""pyloaders - find loaders by data type and dispatch files to them by extension.

Typical use:

    from pyloaders import Document, FileLoaders

    file_loader = FileLoaders.create(Document)
    document = file_loader.load("notes.md")
"""

from pyloaders.core import (
    Document,
    LoaderError,
    LoaderInstantiationError,
    MarkdownDocument,
    MissingExtensionError,
    SettingsError,
    UnsupportedExtensionError,
)
from pyloaders.core.settings import Settings, default_settings, load_settings
from pyloaders.libs.loader import (
    FileLoader,
    FileLoaders,
    Loader,
    LoaderRegistry,
    create_file_loader,
    default_registry,
    find_all_loaders,
    find_loaders,
)

__version__ = "0.1.0"

__all__ = [
    "Document",
    "MarkdownDocument",
    "Loader",
    "LoaderRegistry",
    "default_registry",
    "find_loaders",
    "find_all_loaders",
    "FileLoader",
    "FileLoaders",
    "create_file_loader",
    "Settings",
    "default_settings",
    "load_settings",
    "LoaderError",
    "LoaderInstantiationError",
    "MissingExtensionError",
    "SettingsError",
    "UnsupportedExtensionError",
]
