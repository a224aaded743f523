"""
Source-root resolution and path encoding for asset references.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote, unquote

from core.settings import AssetSettings
from advantage_assets.advantage_assets.logger import DATA_DIR

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

BUNDLED_ASSETS_DIR = Path(__file__).resolve().parent.parent / "bundled_assets"


@dataclass
class AssetLocations:
    """Filesystem locations consulted while loading and bootstrapping assets."""

    user_default: Path = field(default_factory=lambda: DATA_DIR / "userAssets")
    auto: Path = field(default_factory=lambda: DATA_DIR / "autoAssets")
    bundled: Path = field(default_factory=lambda: BUNDLED_ASSETS_DIR)
    legacy: Path = field(default_factory=lambda: DATA_DIR / "frcData")
    prefs_file: Path = field(default_factory=lambda: DATA_DIR / "prefs.json")


def get_user_assets_path(settings: AssetSettings, locations: AssetLocations) -> Path:
    """Return the configured user asset folder, or the default when unset."""
    if settings.user_assets_folder is None:
        return locations.user_default
    return settings.user_assets_folder


def source_roots(settings: AssetSettings, locations: AssetLocations) -> List[Path]:
    """Return the source roots to scan, highest priority first."""
    return [get_user_assets_path(settings, locations), locations.auto, locations.bundled]


def encode_path(path: os.PathLike | str, sep: Optional[str] = None) -> str:
    """
    Percent-encode each segment of a filesystem path.

    A leading drive segment such as ``C:`` is kept verbatim and segments stay
    joined by the platform separator, so the result can be embedded wherever
    a URI path is expected without spaces, ``#`` or ``%`` being misread.
    """
    separator = sep or os.sep
    segments = os.fspath(path).split(separator)
    encoded = []
    for index, segment in enumerate(segments):
        if index == 0 and segment.endswith(":"):
            encoded.append(segment)
        else:
            encoded.append(quote(segment, safe=_URI_COMPONENT_SAFE, errors="surrogateescape"))
    return separator.join(encoded)


def decode_path(encoded: str) -> Path:
    """Turn an encoded reference back into a filesystem path."""
    return Path(unquote(encoded, errors="surrogateescape"))
