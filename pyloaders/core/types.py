"""Data types produced by the bundled text loaders.

Rules:
- metadata must include `source_name` for traceability
- types are JSON-serializable via to_dict()/from_dict()
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

_HEADING_RE = re.compile(r"^#{1,6}\s+(.+)$", re.MULTILINE)


def _validate_source_name(metadata: Mapping[str, Any]) -> None:
    if "source_name" not in metadata:
        raise ValueError("metadata must contain 'source_name'")


def extract_title(text: str) -> str | None:
    """Return the first Markdown heading, else the first non-empty line."""

    if not text.strip():
        return None

    heading_match = _HEADING_RE.search(text)
    if heading_match:
        return heading_match.group(1).strip()

    for line in text.splitlines():
        cleaned = line.strip()
        if cleaned:
            return cleaned[:200]
    return None


@dataclass
class Document:
    """A plain text document read from a named stream."""

    name: str
    text: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.metadata = dict(self.metadata)
        self.metadata.setdefault("source_name", self.name)
        _validate_source_name(self.metadata)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "text": self.text,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Document":
        return cls(
            name=str(data.get("name", "")),
            text=str(data.get("text", "")),
            metadata=dict(data.get("metadata", {})),
        )


@dataclass
class MarkdownDocument(Document):
    """A Markdown document; `title` is derived from the text when not given."""

    title: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.title is None:
            self.title = extract_title(self.text)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["title"] = self.title
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MarkdownDocument":
        title = data.get("title")
        return cls(
            name=str(data.get("name", "")),
            text=str(data.get("text", "")),
            metadata=dict(data.get("metadata", {})),
            title=str(title) if title is not None else None,
        )
