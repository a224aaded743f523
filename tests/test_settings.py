"""Tests for the preference-file reader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.settings import AssetSettings, AssetSettingsManager


class TestAssetSettingsManager:
    def test_missing_file(self, tmp_path):
        assert AssetSettingsManager(tmp_path / "prefs.json").read_settings() == AssetSettings()

    def test_configured_folder(self, tmp_path):
        prefs = tmp_path / "prefs.json"
        prefs.write_text(json.dumps({"userAssetsFolder": "/srv/assets", "theme": "dark"}), encoding="utf-8")
        settings = AssetSettingsManager(prefs).read_settings()
        assert settings.user_assets_folder == Path("/srv/assets")

    @pytest.mark.parametrize(
        "contents",
        [
            json.dumps({"userAssetsFolder": None}),
            json.dumps({"userAssetsFolder": 12}),
            json.dumps({"userAssetsFolder": "   "}),
            json.dumps(["not", "an", "object"]),
            "{broken",
        ],
    )
    def test_invalid_values_fall_back(self, tmp_path, contents):
        prefs = tmp_path / "prefs.json"
        prefs.write_text(contents, encoding="utf-8")
        assert AssetSettingsManager(prefs).read_settings().user_assets_folder is None

    def test_invalid_utf8_falls_back(self, tmp_path):
        prefs = tmp_path / "prefs.json"
        prefs.write_bytes(b'{"userAssetsFolder": "\xff\xfe"}')
        assert AssetSettingsManager(prefs).read_settings() == AssetSettings()

    def test_deeply_nested_falls_back(self, tmp_path):
        prefs = tmp_path / "prefs.json"
        prefs.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
        assert AssetSettingsManager(prefs).read_settings() == AssetSettings()

    def test_non_standard_constant_falls_back(self, tmp_path):
        prefs = tmp_path / "prefs.json"
        prefs.write_text('{"userAssetsFolder": "/srv/assets", "zoom": NaN}', encoding="utf-8")
        assert AssetSettingsManager(prefs).read_settings() == AssetSettings()
