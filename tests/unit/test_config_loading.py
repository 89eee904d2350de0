"""Settings loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyloaders.core.settings import (
    DEFAULT_ENTRY_POINT_GROUP,
    Settings,
    SettingsError,
    default_settings,
    load_settings,
)

REPO_SETTINGS = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadSettings:
    def test_repo_settings_file(self):
        settings = load_settings(REPO_SETTINGS)

        assert isinstance(settings, Settings)
        assert settings.observability.log_level == "INFO"
        assert settings.discovery.register_builtin is True
        assert settings.discovery.entry_point_group == "pyloaders.loaders"
        assert settings.text.encoding == "utf-8"

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        assert load_settings(_write(tmp_path, "")) == default_settings()

    def test_partial_sections(self, tmp_path: Path):
        settings = load_settings(
            _write(tmp_path, "discovery:\n  entry_point_group: null\ntext:\n  encoding: latin-1\n")
        )

        assert settings.discovery.entry_point_group is None
        assert settings.discovery.register_builtin is True
        assert settings.text.encoding == "latin-1"

    def test_defaults(self):
        settings = default_settings()

        assert settings.discovery.entry_point_group == DEFAULT_ENTRY_POINT_GROUP
        assert settings.observability.log_level == "INFO"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="not found"):
            load_settings(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="Invalid YAML"):
            load_settings(_write(tmp_path, "discovery: [unclosed\n"))

    def test_non_mapping_root(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="expected mapping"):
            load_settings(_write(tmp_path, "- a\n- b\n"))

    def test_invalid_section_type(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="Invalid section type: discovery"):
            load_settings(_write(tmp_path, "discovery: 3\n"))

    def test_invalid_bool(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="discovery.register_builtin"):
            load_settings(_write(tmp_path, "discovery:\n  register_builtin: 'yes please'\n"))

    def test_invalid_log_level(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="observability.log_level"):
            load_settings(_write(tmp_path, "observability:\n  log_level: LOUD\n"))

    def test_unknown_encoding(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="Unknown encoding"):
            load_settings(_write(tmp_path, "text:\n  encoding: klingon-8\n"))

    def test_settings_error_is_value_error(self):
        assert issubclass(SettingsError, ValueError)
