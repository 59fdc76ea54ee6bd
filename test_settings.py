"""Tests for settings persistence and locale lookup order."""

import json

import pytest

from settings import (
    _DEFAULTS,
    ambient_locale,
    load_settings,
    normalize_locale,
    resolve_locale,
    save_settings,
)


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "settings.json")


class TestLoadSave:
    def test_missing_file_gives_defaults(self, settings_path):
        assert load_settings(settings_path) == _DEFAULTS

    def test_round_trip(self, settings_path):
        settings = load_settings(settings_path)
        settings["locale"] = "ar-EG"
        settings["dark_mode"] = True
        save_settings(settings, settings_path)
        assert load_settings(settings_path) == settings

    def test_corrupt_file_gives_defaults(self, settings_path, caplog):
        with open(settings_path, "w", encoding="utf-8") as f:
            f.write("{not json")
        assert load_settings(settings_path) == _DEFAULTS
        assert "unreadable settings" in caplog.text

    def test_wrong_types_are_dropped(self, settings_path):
        with open(settings_path, "w", encoding="utf-8") as f:
            json.dump({"dark_mode": "yes", "locale": 5, "weekday_labels": ["a", "b"],
                       "prev_label": "<"}, f)
        settings = load_settings(settings_path)
        assert settings["dark_mode"] is False
        assert settings["locale"] is None
        assert settings["weekday_labels"] is None
        assert settings["prev_label"] == "<"

    def test_non_object_file(self, settings_path):
        with open(settings_path, "w", encoding="utf-8") as f:
            json.dump([1, 2], f)
        assert load_settings(settings_path) == _DEFAULTS


class TestLocaleLookup:
    @pytest.mark.parametrize("name,tag", [
        ("de_CH.UTF-8", "de-CH"),
        ("en_US", "en-US"),
        ("sr_RS@latin", "sr-RS"),
        ("C", ""),
        ("POSIX", ""),
        ("fr-FR", "fr-FR"),
    ])
    def test_normalize(self, name, tag):
        assert normalize_locale(name) == tag

    def test_env_var_order(self):
        env = {"LANG": "en_US.UTF-8", "LC_TIME": "ar_EG.UTF-8"}
        assert ambient_locale(env) == "ar-EG"
        env["LC_ALL"] = "en_GB.UTF-8"
        assert ambient_locale(env) == "en-GB"

    def test_empty_environment(self):
        assert ambient_locale({}) == ""

    def test_resolution_order(self):
        env = {"LANG": "ja_JP.UTF-8"}
        assert resolve_locale("en-US", {"locale": "ar-EG"}, env) == "en-US"
        assert resolve_locale(None, {"locale": "ar-EG"}, env) == "ar-EG"
        assert resolve_locale(None, {"locale": None}, env) == "ja-JP"
        assert resolve_locale(None, None, {}) == ""
