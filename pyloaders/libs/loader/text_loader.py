"""Plain text and Markdown loaders."""

from __future__ import annotations

import codecs
from typing import BinaryIO

from pyloaders.core.types import Document, MarkdownDocument
from pyloaders.libs.loader.base_loader import Loader


class TextLoader(Loader):
    """Decode a stream into a `Document`."""

    EXTENSIONS = (".txt", ".text", ".log")
    DESCRIPTIONS = ("Text file", "Text file", "Log file")

    def __init__(self, encoding: str = "utf-8") -> None:
        # Fail at construction, not on the first load.
        codecs.lookup(encoding)
        self.encoding = encoding

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return self.EXTENSIONS

    @property
    def file_descriptions(self) -> tuple[str, ...]:
        return self.DESCRIPTIONS

    @property
    def data_type(self) -> type:
        return Document

    def _read_text(self, stream: BinaryIO) -> str:
        return stream.read().decode(self.encoding)

    def load(self, name: str, stream: BinaryIO) -> Document:
        text = self._read_text(stream)
        return Document(
            name=name,
            text=text,
            metadata={"source_name": name, "doc_type": "text", "encoding": self.encoding},
        )


class MarkdownLoader(TextLoader):
    """Decode a stream into a `MarkdownDocument` with its title extracted."""

    EXTENSIONS = (".md", ".markdown")
    DESCRIPTIONS = ("Markdown document", "Markdown document")

    @property
    def data_type(self) -> type:
        return MarkdownDocument

    def load(self, name: str, stream: BinaryIO) -> MarkdownDocument:
        text = self._read_text(stream)
        return MarkdownDocument(
            name=name,
            text=text,
            metadata={"source_name": name, "doc_type": "markdown", "encoding": self.encoding},
        )
