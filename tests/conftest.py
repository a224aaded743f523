"""Shared fixtures for building on-disk asset trees."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable, Optional

import pytest

# Keep log files out of the real home directory.
os.environ.setdefault("ADVANTAGE_ASSETS_HOME", tempfile.mkdtemp(prefix="advantage_assets_test_"))


def write_asset(
    root: Path,
    folder: str,
    config: Optional[Any],
    files: Iterable[str] = (),
) -> Path:
    """Create ``root/folder`` with an optional config.json and empty binaries."""
    target = root / folder
    target.mkdir(parents=True, exist_ok=True)
    if config is not None:
        contents = config if isinstance(config, str) else json.dumps(config)
        (target / "config.json").write_text(contents, encoding="utf-8")
    for name in files:
        (target / name).write_bytes(b"\x00")
    return target


def field2d_config(name: str = "Field", /, **overrides: Any) -> dict:
    config = {
        "name": name,
        "topLeft": [10, 20],
        "bottomRight": [300, 150],
        "widthInches": 651.25,
        "heightInches": 315.5,
    }
    config.update(overrides)
    return config


def field3d_config(name: str = "Arena", **overrides: Any) -> dict:
    config = {"name": name, "widthInches": 651.25, "heightInches": 315.5}
    config.update(overrides)
    return config


def robot_config(name: str = "Bot", **overrides: Any) -> dict:
    config = {"name": name}
    config.update(overrides)
    return config


def joystick_config(name: str = "Pad", components: Optional[list] = None) -> dict:
    return {
        "name": name,
        "components": components
        if components is not None
        else [{"type": "button", "centerPx": [5, 5], "sizePx": [10, 10], "sourceIndex": 1}],
    }


@pytest.fixture()
def roots(tmp_path: Path):
    """Three empty source roots, highest priority first."""
    user = tmp_path / "user"
    auto = tmp_path / "auto"
    bundled = tmp_path / "bundled"
    for root in (user, auto, bundled):
        root.mkdir()
    return user, auto, bundled
