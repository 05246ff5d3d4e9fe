"""Tests for the settings store and the theme preference."""

import json

import pytest

from tourism_helper.config import SettingsManager
from tourism_helper.services import ThemePreference


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    monkeypatch.delenv("TOURISM_THEME", raising=False)
    return tmp_path / "settings.json"


def test_defaults_to_dark(settings_file):
    theme = ThemePreference(SettingsManager(str(settings_file)))

    assert theme.theme == "dark"
    assert theme.is_dark


def test_toggle_persists_every_time(settings_file):
    theme = ThemePreference(SettingsManager(str(settings_file)))

    assert theme.toggle() == "light"
    assert json.loads(settings_file.read_text(encoding="utf-8"))["theme"] == "light"

    assert theme.toggle() == "dark"
    assert json.loads(settings_file.read_text(encoding="utf-8"))["theme"] == "dark"


def test_reads_saved_theme(settings_file):
    settings_file.write_text(json.dumps({"theme": "light"}), encoding="utf-8")

    assert ThemePreference(SettingsManager(str(settings_file))).theme == "light"


def test_invalid_saved_theme_falls_back(settings_file):
    settings_file.write_text(json.dumps({"theme": "sepia"}), encoding="utf-8")

    assert ThemePreference(SettingsManager(str(settings_file))).theme == "dark"


def test_corrupt_settings_file_uses_defaults(settings_file):
    settings_file.write_text("{not json", encoding="utf-8")

    settings = SettingsManager(str(settings_file))

    assert settings.get("theme") == "dark"


def test_environment_overrides_file(settings_file, monkeypatch):
    settings_file.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    monkeypatch.setenv("TOURISM_THEME", "light")

    assert SettingsManager(str(settings_file)).get("theme") == "light"


def test_set_is_visible_to_a_new_manager(settings_file):
    SettingsManager(str(settings_file)).set("theme", "light")

    assert SettingsManager(str(settings_file)).get("theme") == "light"


def test_non_object_file_is_ignored(settings_file):
    settings_file.write_text(json.dumps(["light"]), encoding="utf-8")

    assert SettingsManager(str(settings_file)).get("theme") == "dark"
