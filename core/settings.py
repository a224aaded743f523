"""
Preference-file backed configuration for the asset loader.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from shared.config_schema import JSON_ERRORS, parse_json
from advantage_assets.advantage_assets import logger as app_logger

_LOGGER = app_logger.get_logger()

_USER_ASSETS_KEY = "userAssetsFolder"


@dataclass(eq=True)
class AssetSettings:
    user_assets_folder: Optional[Path] = None


class AssetSettingsManager:
    """Loads persisted preferences from a JSON file and ignores invalid data."""

    def __init__(self, prefs_file: Path) -> None:
        self.prefs_file = prefs_file

    def read_settings(self) -> AssetSettings:
        prefs = self._read_prefs()
        if prefs is None:
            return AssetSettings()
        return AssetSettings(user_assets_folder=self._read_folder(prefs, _USER_ASSETS_KEY))

    def _read_prefs(self) -> Optional[Dict[str, Any]]:
        try:
            contents = self.prefs_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.warning("Unable to read preferences {}: {}", self.prefs_file, exc)
            return None

        try:
            prefs = parse_json(contents)
        except JSON_ERRORS as exc:
            _LOGGER.warning("Preferences file {} is not valid JSON: {}", self.prefs_file, exc)
            return None

        if not isinstance(prefs, dict):
            _LOGGER.warning("Preferences file {} does not contain an object.", self.prefs_file)
            return None
        return prefs

    def _read_folder(self, prefs: Dict[str, Any], name: str) -> Optional[Path]:
        raw = prefs.get(name)
        if raw is None:
            return None
        if not isinstance(raw, str) or not raw.strip():
            _LOGGER.warning("Preference {} has unexpected value {!r}.", name, raw)
            return None
        return Path(raw.strip()).expanduser()
