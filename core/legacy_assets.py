"""
Folder bootstrap and conversion of legacy "FRC Data" assets.

The legacy layout keeps every asset flat in one folder:
``<Kind>_<Title>.json`` plus ``<Kind>_<Title>.png`` or ``.glb`` and, for
multi-part models, ``<Kind>_<Title>_<index>.glb``. Conversion moves each
title into its own ``<Kind>_<Title>/`` folder in the current layout.
"""

from __future__ import annotations

import json
import shutil
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional

from core.asset_paths import AssetLocations
from shared.asset_configs import AssetKind
from shared.config_schema import CONFIG_FILENAME, JSON_ERRORS, parse_json
from advantage_assets.advantage_assets import logger as app_logger

_LOGGER = app_logger.get_logger()

README_FILENAME = "README.txt"
USER_ASSETS_README = (
    "This folder contains extra assets for the odometry, 3D field, and joystick views. "
    'For more details, see the "Custom Fields/Robots/Joysticks" page in the AdvantageScope '
    "documentation (available through the documentation tab in the app or the URL below).\n\n"
    "https://github.com/Mechanical-Advantage/AdvantageScope/blob/main/docs/CUSTOM-ASSETS.md"
)
ALLOWED_TITLE_CHARS = frozenset(string.ascii_letters + string.digits)


class LegacyMigrationError(RuntimeError):
    """Raised when a legacy asset references a binary that is not present."""


@dataclass
class MigrationResult:
    created: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    removed_legacy_root: bool = False
    declined: bool = False


def create_asset_folders(locations: AssetLocations) -> None:
    """Ensure the automatic and default user roots exist and carry a README."""
    locations.auto.mkdir(parents=True, exist_ok=True)
    locations.user_default.mkdir(parents=True, exist_ok=True)
    (locations.user_default / README_FILENAME).write_text(USER_ASSETS_README, encoding="utf-8")


def sanitize_title(title: str) -> str:
    return "".join(char for char in title if char in ALLOWED_TITLE_CHARS)


def _legacy_title(filename: str) -> str:
    """``Robot_My_Bot.v2.json`` -> ``My_Bot.v2``."""
    remainder = "_".join(filename.split("_")[1:])
    return ".".join(remainder.split(".")[:-1])


def _kind_for(filename: str) -> Optional[AssetKind]:
    for kind in AssetKind:
        if filename.startswith(kind.prefix):
            return kind
    return None


def _read_legacy_config(path: Path) -> Any:
    try:
        return parse_json(path.read_text(encoding="utf-8"))
    except (OSError, *JSON_ERRORS) as exc:
        _LOGGER.warning("Unable to read legacy config {}: {}", path, exc)
        return None


def _copy_required(source: Path, destination: Path) -> None:
    if not source.is_file():
        raise LegacyMigrationError(f"Legacy asset file not found: {source}")
    shutil.copy2(source, destination)


def _copy_binaries(legacy_root: Path, kind: AssetKind, title: str, target: Path) -> None:
    stem = f"{kind.value}_{title}"
    if kind in (AssetKind.FIELD_2D, AssetKind.JOYSTICK):
        _copy_required(legacy_root / f"{stem}.png", target / "image.png")
        return

    _copy_required(legacy_root / f"{stem}.glb", target / "model.glb")
    index = 0
    while True:
        source = legacy_root / f"{stem}_{index}.glb"
        if not source.is_file():
            break
        shutil.copy2(source, target / f"model_{index}.glb")
        index += 1


def _convert_one(legacy_root: Path, filename: str, user_root: Path, result: MigrationResult) -> None:
    kind = _kind_for(filename)
    if kind is None:
        _LOGGER.debug("Ignoring unrecognised legacy file {}", filename)
        result.skipped.append(filename)
        return

    title = _legacy_title(filename)
    clean_title = sanitize_title(title)
    target = user_root / f"{kind.value}_{clean_title}"
    if target.exists():
        _LOGGER.info("Legacy asset {} already converted at {}; skipping.", filename, target)
        result.skipped.append(filename)
        return

    config = _read_legacy_config(legacy_root / filename)
    if kind is AssetKind.JOYSTICK:
        config = {"name": clean_title, "components": config}
    elif not isinstance(config, dict):
        config = {}
    config["name"] = clean_title

    target.mkdir(parents=True)
    try:
        _copy_binaries(legacy_root, kind, title, target)
        (target / CONFIG_FILENAME).write_text(json.dumps(config, indent=2), encoding="utf-8")
    except (LegacyMigrationError, OSError):
        shutil.rmtree(target, ignore_errors=True)
        raise

    _LOGGER.info("Converted legacy asset {} to {}", filename, target)
    result.created.append(target)


def convert_legacy_assets(locations: AssetLocations, confirm: Callable[[], bool]) -> MigrationResult:
    """
    Convert the legacy asset folder into the current layout, at most once.

    An absent legacy root is a no-op. A root holding at most one visible entry
    is deleted without asking. Otherwise ``confirm`` decides whether to
    proceed; the legacy root is deleted after a successful conversion.
    """
    result = MigrationResult()
    legacy_root = locations.legacy
    if not legacy_root.is_dir():
        return result

    entries = sorted(entry.name for entry in legacy_root.iterdir())
    visible = [name for name in entries if not name.startswith(".")]
    if len(visible) <= 1:
        _LOGGER.info("Removing unused legacy asset folder {}", legacy_root)
        shutil.rmtree(legacy_root)
        result.removed_legacy_root = True
        return result

    if not confirm():
        _LOGGER.info("Legacy asset conversion declined.")
        result.declined = True
        return result

    locations.user_default.mkdir(parents=True, exist_ok=True)
    for filename in entries:
        if filename.endswith(".json"):
            _convert_one(legacy_root, filename, locations.user_default, result)

    shutil.rmtree(legacy_root)
    result.removed_legacy_root = True
    return result
