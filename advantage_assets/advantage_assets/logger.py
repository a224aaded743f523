"""
Logging setup for the asset loader.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
DATA_DIR = Path(os.environ.get("ADVANTAGE_ASSETS_HOME", str(Path.home() / ".advantage_assets")))
DEFAULT_LOG_PATH = DATA_DIR / "logs" / "assets.log"


def configure(log_path: Optional[Path] = None, *, verbose: bool = False, force: bool = False) -> None:
    """
    Configure loguru for the application.

    Runs once per process unless ``force`` is given, which lets the command
    line re-apply the console level after parsing ``--verbose``.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED and not force:
        return
    target = log_path or DEFAULT_LOG_PATH

    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        _logger.warning("Log directory {} is not writable; file logging disabled.", target.parent)
    else:
        _logger.add(
            target,
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
            errors="backslashreplace",
            backtrace=True,
            diagnose=False,
        )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger
