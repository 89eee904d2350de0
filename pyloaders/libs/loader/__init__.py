"""Loader framework: contract, registry, discovery and file dispatch.

Importing this package registers the bundled loaders into the process-wide
registry so `FileLoaders.create(...)` works without further setup.
"""

from __future__ import annotations

from functools import partial

from pyloaders.libs.loader.base_loader import Loader
from pyloaders.libs.loader.discovery import find_all_loaders, find_loaders
from pyloaders.libs.loader.file_loader import FileLoader
from pyloaders.libs.loader.file_loaders import FileLoaders, create_file_loader
from pyloaders.libs.loader.image_loader import ImageLoader
from pyloaders.libs.loader.registry import LoaderRegistry, default_registry
from pyloaders.libs.loader.structured_loader import JsonLoader, YamlLoader
from pyloaders.libs.loader.text_loader import MarkdownLoader, TextLoader


def register_builtin_loaders(registry: LoaderRegistry, encoding: str = "utf-8") -> None:
    """Register the bundled loaders, in dispatch priority order."""

    registry.register(partial(TextLoader, encoding=encoding), name="text")
    registry.register(partial(MarkdownLoader, encoding=encoding), name="markdown")
    registry.register(JsonLoader, name="json")
    registry.register(YamlLoader, name="yaml")
    registry.register(ImageLoader, name="image")


if "text" not in default_registry:
    register_builtin_loaders(default_registry)

__all__ = [
    "Loader",
    "LoaderRegistry",
    "default_registry",
    "register_builtin_loaders",
    "find_loaders",
    "find_all_loaders",
    "FileLoader",
    "FileLoaders",
    "create_file_loader",
    "TextLoader",
    "MarkdownLoader",
    "JsonLoader",
    "YamlLoader",
    "ImageLoader",
]
