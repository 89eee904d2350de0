"""Settings loading and validation.

This module provides a minimal, type-safe configuration loader for the
framework. Every section is optional; missing values fall back to defaults.

Design principles:
- Fail-fast: wrongly typed fields raise a readable error that includes the field path
- No side effects: this module only parses/validates configuration; no registry/IO init
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from pyloaders.core.errors import SettingsError

DEFAULT_ENTRY_POINT_GROUP = "pyloaders.loaders"


@dataclass(frozen=True)
class ObservabilitySettings:
    log_level: str = "INFO"


@dataclass(frozen=True)
class DiscoverySettings:
    register_builtin: bool = True
    entry_point_group: str | None = DEFAULT_ENTRY_POINT_GROUP


@dataclass(frozen=True)
class TextSettings:
    encoding: str = "utf-8"


@dataclass(frozen=True)
class Settings:
    observability: ObservabilitySettings = field(default_factory=ObservabilitySettings)
    discovery: DiscoverySettings = field(default_factory=DiscoverySettings)
    text: TextSettings = field(default_factory=TextSettings)


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _optional_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SettingsError(f"Invalid section type: {key}")
    return value


def _as_str(value: Any, path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"Invalid value for {path}: expected non-empty string")
    return value


def _as_optional_str(value: Any, path: str) -> str | None:
    if value is None:
        return None
    return _as_str(value, path)


def _as_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise SettingsError(f"Invalid value for {path}: expected bool")
    return value


def default_settings() -> Settings:
    """Return settings with every field at its default."""

    return Settings()


def validate_settings(settings: Settings) -> None:
    """Validate basic invariants."""

    if settings.observability.log_level.upper() not in _LOG_LEVELS:
        raise SettingsError(
            f"Invalid value for observability.log_level: expected one of {', '.join(_LOG_LEVELS)}"
        )
    try:
        "".encode(settings.text.encoding)
    except LookupError as e:
        raise SettingsError(f"Unknown encoding for text.encoding: {settings.text.encoding}") from e


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file."""

    settings_path = Path(path)
    if not settings_path.exists():
        raise SettingsError(f"Settings file not found: {settings_path}")

    try:
        raw_obj = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in settings file: {settings_path}") from e

    if raw_obj is None:
        raw_obj = {}
    if not isinstance(raw_obj, Mapping):
        raise SettingsError(f"Invalid settings root: expected mapping in {settings_path}")

    observability_raw = _optional_section(raw_obj, "observability")
    discovery_raw = _optional_section(raw_obj, "discovery")
    text_raw = _optional_section(raw_obj, "text")

    observability = ObservabilitySettings(
        log_level=_as_str(
            observability_raw.get("log_level", "INFO"),
            "observability.log_level",
        ),
    )

    discovery = DiscoverySettings(
        register_builtin=_as_bool(
            discovery_raw.get("register_builtin", True),
            "discovery.register_builtin",
        ),
        entry_point_group=_as_optional_str(
            discovery_raw.get("entry_point_group", DEFAULT_ENTRY_POINT_GROUP),
            "discovery.entry_point_group",
        ),
    )

    text = TextSettings(
        encoding=_as_str(text_raw.get("encoding", "utf-8"), "text.encoding"),
    )

    settings = Settings(observability=observability, discovery=discovery, text=text)

    validate_settings(settings)
    return settings
