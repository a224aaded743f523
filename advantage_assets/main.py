"""
Entry point for the advantage_assets command line.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from core.asset_loader import load_assets
from core.asset_paths import AssetLocations, source_roots
from core.legacy_assets import LegacyMigrationError, convert_legacy_assets, create_asset_folders
from core.settings import AssetSettings, AssetSettingsManager
from shared.asset_configs import AssetCollection
from advantage_assets.advantage_assets import logger as app_logger

_LOGGER = app_logger.get_logger()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advantage-assets",
        description="Discover and validate field, robot, and joystick assets.",
    )
    parser.add_argument("--user-dir", type=Path, help="User asset folder (overrides preferences).")
    parser.add_argument("--auto-dir", type=Path, help="Automatically managed asset folder.")
    parser.add_argument("--bundled-dir", type=Path, help="Bundled read-only asset folder.")
    parser.add_argument("--prefs", type=Path, help="Preferences file holding userAssetsFolder.")
    parser.add_argument("--json", action="store_true", help="Print the loaded collection as JSON.")
    parser.add_argument("--migrate", action="store_true", help="Convert legacy assets before loading.")
    parser.add_argument("--yes", action="store_true", help="Convert legacy assets without prompting.")
    parser.add_argument("--verbose", action="store_true", help="Log every scanned folder.")
    return parser


def _resolve_locations(args: argparse.Namespace) -> AssetLocations:
    locations = AssetLocations()
    if args.auto_dir is not None:
        locations.auto = args.auto_dir
    if args.bundled_dir is not None:
        locations.bundled = args.bundled_dir
    if args.prefs is not None:
        locations.prefs_file = args.prefs
    return locations


def _confirm(assume_yes: bool):
    if assume_yes:
        return lambda: True

    def ask() -> bool:
        from advantage_assets.advantage_assets.prompts import confirm_legacy_conversion

        return confirm_legacy_conversion()

    return ask


def _print_summary(assets: AssetCollection) -> None:
    sections = (
        ("2D fields", [config.name for config in assets.field2ds]),
        ("3D fields", [config.name for config in assets.field3ds]),
        ("Robots", [config.name for config in assets.robots]),
        ("Joysticks", [config.name for config in assets.joysticks]),
        ("Load failures", list(assets.load_failures)),
    )
    for title, names in sections:
        print(f"{title} ({len(names)}):")
        for name in names:
            print(f"  {name}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Bootstrap folders, optionally migrate, load assets and report them."""
    args = _build_parser().parse_args(argv)
    app_logger.configure(verbose=args.verbose, force=True)

    locations = _resolve_locations(args)
    create_asset_folders(locations)

    if args.migrate:
        try:
            convert_legacy_assets(locations, _confirm(args.yes))
        except LegacyMigrationError as exc:
            _LOGGER.error("Legacy asset conversion failed: {}", exc)

    if args.user_dir is not None:
        settings = AssetSettings(user_assets_folder=args.user_dir)
    else:
        settings = AssetSettingsManager(locations.prefs_file).read_settings()

    assets = load_assets(source_roots(settings, locations))
    if args.json:
        json.dump(assets.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        _print_summary(assets)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
