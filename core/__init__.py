"""
Core asset loading helpers shared by the command line and embedding apps.
"""

from .asset_loader import load_assets  # noqa: F401
from .asset_paths import AssetLocations, encode_path, source_roots  # noqa: F401
from .settings import AssetSettings, AssetSettingsManager  # noqa: F401
