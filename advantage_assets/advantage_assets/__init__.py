"""
advantage_assets package.

Application-level helpers for the asset loader command line: logging
configuration and interactive prompts.
"""

__all__ = [
    "logger",
    "prompts",
]
