"""Factory for `FileLoader` instances bound to a data type."""

from __future__ import annotations

from typing import TypeVar

from pyloaders.libs.loader.discovery import find_loaders
from pyloaders.libs.loader.file_loader import FileLoader
from pyloaders.libs.loader.registry import LoaderRegistry

T = TypeVar("T")


class FileLoaders:
    """Create `FileLoader` instances from the loaders found by discovery.

    Usage:
        file_loader = FileLoaders.create(Document)
        document = file_loader.load("notes.md")
    """

    @classmethod
    def create(cls, data_type: type[T], registry: LoaderRegistry | None = None) -> FileLoader[T]:
        """Bind every loader producing `data_type` (or a subclass) into a `FileLoader`."""

        return FileLoader(find_loaders(data_type, registry))


def create_file_loader(data_type: type[T], registry: LoaderRegistry | None = None) -> FileLoader[T]:
    return FileLoaders.create(data_type, registry)
