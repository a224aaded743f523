"""
Asset discovery for fields, robots, and joysticks.

Scans each source root in priority order, builds a record for every
classified sub-folder, admits the records whose invariants hold and whose
binaries exist, then removes shadowed duplicates and sorts the result.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from core.asset_paths import decode_path, encode_path
from core.asset_sort import sort_collection
from shared.asset_configs import (
    AssetCollection,
    AssetConfig,
    AssetKind,
    Config2d,
    Config3dField,
    Config3dRobot,
    ConfigJoystick,
)
from shared.config_schema import (
    CONFIG_FILENAME,
    DescriptorError,
    parse_field2d,
    parse_field3d,
    parse_joystick,
    parse_robot,
    read_descriptor,
)
from advantage_assets.advantage_assets import logger as app_logger

_LOGGER = app_logger.get_logger()

HIDDEN_PREFIX = "."
AUXILIARY_EXTENSION = ".glb"

T = TypeVar("T")

_PARSERS: Dict[AssetKind, Callable[[dict, str], AssetConfig]] = {
    AssetKind.FIELD_2D: parse_field2d,
    AssetKind.FIELD_3D: parse_field3d,
    AssetKind.ROBOT: parse_robot,
    AssetKind.JOYSTICK: parse_joystick,
}


def classify(name: str) -> Optional[AssetKind]:
    """Return the asset kind encoded in a folder name prefix, if any."""
    for kind in AssetKind:
        if name.startswith(kind.prefix):
            return kind
    return None


def auxiliary_model_path(primary: Path, index: int) -> Path:
    """``.../model.glb`` -> ``.../model_<index>.glb``."""
    return Path(str(primary)[:-4] + f"_{index}{AUXILIARY_EXTENSION}")


def _file_exists(path: Path) -> bool:
    return path.is_file()


def _auxiliaries_exist(primary: Path, count: int) -> bool:
    return all(_file_exists(auxiliary_model_path(primary, index)) for index in range(count))


def check_admission(record: AssetConfig) -> bool:
    """Evaluate every invariant for a record, including on-disk existence."""
    if not isinstance(record, (Config2d, Config3dField, Config3dRobot, ConfigJoystick)):
        raise TypeError(f"Unsupported asset record: {type(record).__name__}")
    if not record.name:
        return False
    primary = decode_path(record.path)

    if isinstance(record, Config2d):
        return (
            record.top_left[0] >= 0
            and record.top_left[1] >= 0
            and record.bottom_right[0] >= 0
            and record.bottom_right[1] >= 0
            and record.width_inches > 0
            and record.height_inches > 0
            and _file_exists(primary)
        )
    if isinstance(record, Config3dField):
        return (
            record.width_inches > 0
            and record.height_inches > 0
            and _file_exists(primary)
            and _auxiliaries_exist(primary, len(record.game_pieces))
        )
    if isinstance(record, Config3dRobot):
        return (
            all(camera.name for camera in record.cameras)
            and _file_exists(primary)
            and _auxiliaries_exist(primary, len(record.components))
        )
    return all(component.is_valid() for component in record.components) and _file_exists(primary)


def list_candidates(root: Path) -> List[Path]:
    """Return visible sub-folders of a source root, greatest name first."""
    try:
        entries = [entry for entry in root.iterdir() if entry.is_dir() and not entry.name.startswith(HIDDEN_PREFIX)]
    except FileNotFoundError:
        _LOGGER.warning("Asset source {} does not exist; skipping.", root)
        return []
    except OSError as exc:
        _LOGGER.warning("Unable to list asset source {}: {}", root, exc)
        return []
    return sorted(entries, key=lambda entry: entry.name, reverse=True)


def build_record(folder: Path, kind: AssetKind) -> Optional[AssetConfig]:
    """Parse the descriptor inside ``folder``; None when it cannot be read."""
    try:
        raw = read_descriptor(folder / CONFIG_FILENAME)
    except DescriptorError as exc:
        _LOGGER.debug("Skipping {}: {}", folder.name, exc)
        return None
    return _PARSERS[kind](raw, encode_path(folder / kind.primary_file))


def dedupe_by_name(records: Iterable[T]) -> List[T]:
    """Keep the first record seen for each name."""
    seen = set()
    unique: List[T] = []
    for record in records:
        if record.name in seen:
            continue
        seen.add(record.name)
        unique.append(record)
    return unique


def scan_root(root: Path, assets: AssetCollection) -> None:
    """Scan one source root, appending admitted records and failed names."""
    for folder in list_candidates(root):
        kind = classify(folder.name)
        if kind is None:
            continue

        # Assume failure; admission removes the entry again.
        assets.load_failures.append(folder.name)
        record = build_record(folder, kind)
        if record is None:
            continue

        if check_admission(record):
            assets.records_for(kind).append(record)
            assets.load_failures.remove(folder.name)
            _LOGGER.debug("Loaded {} '{}' from {}", kind.value, record.name, folder)
        else:
            _LOGGER.debug("Rejected {} in {}: invariants or files not satisfied.", kind.value, folder)


def load_assets(roots: Sequence[Path]) -> AssetCollection:
    """
    Load every asset under ``roots`` (highest priority first).

    Per-folder problems never raise; they leave the folder name in
    ``load_failures``. Records from earlier roots shadow later ones with the
    same name.
    """
    assets = AssetCollection()
    for root in roots:
        scan_root(Path(root), assets)

    unique = AssetCollection(
        field2ds=dedupe_by_name(assets.field2ds),
        field3ds=dedupe_by_name(assets.field3ds),
        robots=dedupe_by_name(assets.robots),
        joysticks=dedupe_by_name(assets.joysticks),
        load_failures=assets.load_failures,
    )
    result = sort_collection(unique)

    _LOGGER.info(
        "Loaded {} 2D fields, {} 3D fields, {} robots, {} joysticks ({} failures).",
        len(result.field2ds),
        len(result.field3ds),
        len(result.robots),
        len(result.joysticks),
        len(result.load_failures),
    )
    if result.load_failures:
        _LOGGER.warning("Assets that failed to load: {}", ", ".join(result.load_failures))
    return result
