"""Tests for folder bootstrap and legacy asset conversion."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.asset_loader import load_assets
from core.asset_paths import AssetLocations
from core.legacy_assets import (
    README_FILENAME,
    LegacyMigrationError,
    convert_legacy_assets,
    create_asset_folders,
    sanitize_title,
)


@pytest.fixture()
def locations(tmp_path: Path) -> AssetLocations:
    return AssetLocations(
        user_default=tmp_path / "userAssets",
        auto=tmp_path / "autoAssets",
        bundled=tmp_path / "bundled",
        legacy=tmp_path / "frcData",
        prefs_file=tmp_path / "prefs.json",
    )


def _legacy_file(locations: AssetLocations, name: str, contents=b"\x00") -> None:
    locations.legacy.mkdir(exist_ok=True)
    path = locations.legacy / name
    if isinstance(contents, (dict, list)):
        path.write_text(json.dumps(contents), encoding="utf-8")
    else:
        path.write_bytes(contents)


def _never():
    raise AssertionError("confirmation should not be requested")


class TestCreateAssetFolders:
    def test_creates_roots_and_readme(self, locations):
        create_asset_folders(locations)
        assert locations.auto.is_dir()
        assert (locations.user_default / README_FILENAME).read_text(encoding="utf-8").startswith("This folder")

    def test_idempotent(self, locations):
        create_asset_folders(locations)
        create_asset_folders(locations)
        assert locations.user_default.is_dir()


class TestConvertLegacyAssets:
    def test_absent_legacy_root(self, locations):
        result = convert_legacy_assets(locations, _never)
        assert result.created == []
        assert not result.removed_legacy_root

    def test_nearly_empty_root_removed_without_prompt(self, locations):
        _legacy_file(locations, "prefs.json", {})
        _legacy_file(locations, ".DS_Store")
        result = convert_legacy_assets(locations, _never)
        assert result.removed_legacy_root
        assert not locations.legacy.exists()

    def test_declined(self, locations):
        _legacy_file(locations, "Field2d_Old.json", {"topLeft": [0, 0]})
        _legacy_file(locations, "Field2d_Old.png")
        result = convert_legacy_assets(locations, lambda: False)
        assert result.declined
        assert locations.legacy.exists()
        assert not locations.user_default.exists()

    def test_converts_every_kind(self, locations):
        field2d = {"topLeft": [1, 1], "bottomRight": [9, 9], "widthInches": 10, "heightInches": 5}
        _legacy_file(locations, "Field2d_My Field.json", field2d)
        _legacy_file(locations, "Field2d_My Field.png")
        _legacy_file(locations, "Field3d_Arena.json", {"widthInches": 10, "heightInches": 5})
        _legacy_file(locations, "Field3d_Arena.glb")
        _legacy_file(locations, "Robot_Kit-Bot.json", {"components": [{}, {}]})
        _legacy_file(locations, "Robot_Kit-Bot.glb")
        _legacy_file(locations, "Robot_Kit-Bot_0.glb")
        _legacy_file(locations, "Robot_Kit-Bot_1.glb")
        _legacy_file(
            locations,
            "Joystick_Pad.json",
            [{"type": "button", "sizePx": [4, 4], "sourceIndex": 0}],
        )
        _legacy_file(locations, "Joystick_Pad.png")

        result = convert_legacy_assets(locations, lambda: True)

        user = locations.user_default
        assert sorted(path.name for path in result.created) == [
            "Field2d_MyField",
            "Field3d_Arena",
            "Joystick_Pad",
            "Robot_KitBot",
        ]
        assert (user / "Field2d_MyField" / "image.png").is_file()
        assert (user / "Robot_KitBot" / "model_1.glb").is_file()
        joystick = json.loads((user / "Joystick_Pad" / "config.json").read_text(encoding="utf-8"))
        assert joystick["name"] == "Pad"
        assert joystick["components"][0]["type"] == "button"
        robot = json.loads((user / "Robot_KitBot" / "config.json").read_text(encoding="utf-8"))
        assert robot["name"] == "KitBot"
        assert result.removed_legacy_root
        assert not locations.legacy.exists()

        assets = load_assets([user])
        assert [config.name for config in assets.field2ds] == ["MyField"]
        assert [config.name for config in assets.robots] == ["KitBot"]
        assert assets.load_failures == []

    def test_existing_target_skipped(self, locations):
        _legacy_file(locations, "Robot_Bot.json", {"position": [1, 2, 3]})
        _legacy_file(locations, "Robot_Bot.glb")
        existing = locations.user_default / "Robot_Bot"
        existing.mkdir(parents=True)
        result = convert_legacy_assets(locations, lambda: True)
        assert result.skipped == ["Robot_Bot.json"]
        assert list(existing.iterdir()) == []

    @pytest.mark.parametrize(
        "contents",
        [b'{"position": "\xff\xfe"}', ("[" * 100000 + "]" * 100000).encode("utf-8"), b'{"fov": Infinity}'],
    )
    def test_unreadable_legacy_config_still_converts(self, locations, contents):
        _legacy_file(locations, "Robot_Bot.json", contents)
        _legacy_file(locations, "Robot_Bot.glb")

        result = convert_legacy_assets(locations, lambda: True)

        target = locations.user_default / "Robot_Bot"
        assert result.created == [target]
        assert json.loads((target / "config.json").read_text(encoding="utf-8")) == {"name": "Bot"}
        assert not locations.legacy.exists()

    def test_missing_binary_raises_and_cleans_up(self, locations):
        _legacy_file(locations, "Robot_Bot.json", {})
        _legacy_file(locations, "Robot_Other.glb")
        with pytest.raises(LegacyMigrationError):
            convert_legacy_assets(locations, lambda: True)
        assert not (locations.user_default / "Robot_Bot").exists()
        assert locations.legacy.exists()


def test_sanitize_title():
    assert sanitize_title("2024 Crescendo (v2)!") == "2024Crescendov2"
