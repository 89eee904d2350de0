"""Error types raised by the loader framework.

`LoaderError` derives from `OSError` so callers that already guard file
access with `except OSError` also see dispatch failures.
"""

from __future__ import annotations

from os import PathLike


class LoaderError(OSError):
    """Base class for loader framework errors."""


class MissingExtensionError(LoaderError):
    """Raised when a file name carries no extension to dispatch on."""

    def __init__(self, file: str | PathLike[str]):
        super().__init__(f"File has no extension: {file}")
        self.file = file


class UnsupportedExtensionError(LoaderError):
    """Raised when no bound loader claims the extension of a file."""

    def __init__(self, extension: str, file: str | PathLike[str]):
        super().__init__(f"No loader found for extension {extension} of file {file}")
        self.extension = extension
        self.file = file


class LoaderInstantiationError(LoaderError):
    """Raised when a registered loader factory cannot produce a loader."""

    def __init__(self, name: str, message: str):
        super().__init__(f"Failed to instantiate loader '{name}': {message}")
        self.name = name


class SettingsError(ValueError):
    """Raised when settings are missing or invalid."""
