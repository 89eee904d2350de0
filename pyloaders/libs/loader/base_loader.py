"""Base loader contract.

A loader declares which file extensions it understands, a human readable
description for each of them, and the type of object it produces. The
framework never constructs loaders itself beyond calling registered
factories, and never serializes calls into them: a loader bound to a shared
`FileLoader` may be invoked from several threads at once and must be
reentrant if callers do that.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Sequence


class Loader(ABC):
    """Abstract loader for objects of one data type read from binary streams."""

    @property
    @abstractmethod
    def file_extensions(self) -> Sequence[str]:
        """Supported file extensions, including the leading "." dot.

        Consumers compare extensions case-insensitively.
        """

    @property
    @abstractmethod
    def file_descriptions(self) -> Sequence[str]:
        """One description per entry of `file_extensions`, in the same order."""

    @property
    @abstractmethod
    def data_type(self) -> type:
        """The type of the objects returned by `load`."""

    @abstractmethod
    def load(self, name: str, stream: BinaryIO) -> Any:
        """Load an object from `stream`.

        The returned object must be an instance of `data_type`. `name` is the
        file name the stream was opened from. The stream is owned by the
        caller; loaders read from it but do not close it.
        """

    def __repr__(self) -> str:
        extensions = ", ".join(self.file_extensions)
        data_type = getattr(self.data_type, "__name__", repr(self.data_type))
        return f"{type(self).__name__}({extensions} -> {data_type})"
