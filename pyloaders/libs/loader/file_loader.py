"""Dispatch file loads to loaders by file extension."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Any, BinaryIO, Generic, Iterable, TypeVar

from pyloaders.core.errors import MissingExtensionError, UnsupportedExtensionError
from pyloaders.libs.loader.base_loader import Loader

logger = logging.getLogger(__name__)

T = TypeVar("T")


def open_stream(path: Path) -> BinaryIO:
    """Open `path` for binary reading."""

    return path.open("rb")


def file_extension(file_name: str) -> str | None:
    """Return the substring from the last "." of `file_name`, or None."""

    dot_index = file_name.rfind(".")
    if dot_index == -1:
        return None
    return file_name[dot_index:]


class FileLoader(Generic[T]):
    """Load objects from files using one of a fixed set of loaders.

    The loaders are copied at construction. A file is dispatched to the first
    loader, in binding order, that declares the file's extension; when two
    loaders claim the same extension the earlier one always wins.

    Instances hold no mutable state and can be shared between threads. Calls
    for the same extension reach the same loader instance concurrently.
    """

    def __init__(self, loaders: Iterable[Loader]) -> None:
        self._loaders: tuple[Loader, ...] = tuple(loaders)

    @property
    def loaders(self) -> tuple[Loader, ...]:
        return self._loaders

    def supported_extensions(self) -> list[str]:
        """Return every supported extension once, in first-seen order."""

        extensions: dict[str, None] = {}
        for loader in self._loaders:
            for extension in loader.file_extensions:
                extensions.setdefault(extension, None)
        return list(extensions)

    def file_filters(self) -> list[tuple[str, str]]:
        """Return `(extension, description)` pairs for file dialogs.

        Each extension is paired with the description of the first loader
        declaring it. Loaders with fewer descriptions than extensions fall
        back to the extension itself.
        """

        filters: dict[str, str] = {}
        for loader in self._loaders:
            descriptions = list(loader.file_descriptions)
            for index, extension in enumerate(loader.file_extensions):
                if extension in filters:
                    continue
                filters[extension] = descriptions[index] if index < len(descriptions) else extension
        return list(filters.items())

    def find_loader(self, extension: str) -> Loader | None:
        """Return the first loader declaring `extension`, ignoring case."""

        wanted = extension.lower()
        for loader in self._loaders:
            for candidate in loader.file_extensions:
                if candidate.lower() == wanted:
                    return loader
        return None

    def load(self, file: str | PathLike[str]) -> T:
        """Load the object stored in `file`.

        Raises:
            MissingExtensionError: the file name has no extension.
            UnsupportedExtensionError: no bound loader declares the extension.
            OSError: the file could not be opened.

        Whatever the selected loader raises is propagated unchanged.
        """

        path = Path(file)
        file_name = path.name
        extension = file_extension(file_name)
        if extension is None:
            raise MissingExtensionError(file)

        loader = self.find_loader(extension)
        if loader is None:
            raise UnsupportedExtensionError(extension, file)

        stream = open_stream(path)
        try:
            result: Any = loader.load(file_name, stream)
            return result
        finally:
            try:
                stream.close()
            except Exception as error:  # noqa: BLE001 - never mask the load outcome
                logger.warning("Failed to close %s: %s", file, error)
