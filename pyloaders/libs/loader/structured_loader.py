"""JSON and YAML loaders producing plain dictionaries."""

from __future__ import annotations

import json
from typing import Any, BinaryIO, Mapping

import yaml

from pyloaders.libs.loader.base_loader import Loader


def _as_dict(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"Invalid document root in {name}: expected mapping, got {type(value).__name__}")
    return dict(value)


class JsonLoader(Loader):
    """Parse a JSON object."""

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return (".json",)

    @property
    def file_descriptions(self) -> tuple[str, ...]:
        return ("JSON document",)

    @property
    def data_type(self) -> type:
        return dict

    def load(self, name: str, stream: BinaryIO) -> dict[str, Any]:
        return _as_dict(json.load(stream), name)


class YamlLoader(Loader):
    """Parse a YAML mapping with `yaml.safe_load`. An empty document loads as `{}`."""

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return (".yaml", ".yml")

    @property
    def file_descriptions(self) -> tuple[str, ...]:
        return ("YAML document", "YAML document")

    @property
    def data_type(self) -> type:
        return dict

    def load(self, name: str, stream: BinaryIO) -> dict[str, Any]:
        raw_obj = yaml.safe_load(stream)
        if raw_obj is None:
            return {}
        return _as_dict(raw_obj, name)
