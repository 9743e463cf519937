"""Locations of bundled icon resources."""

from __future__ import annotations

from pathlib import Path

ICON_PATH_PREFIX = "://icons/"


def icon_path(icon_name: str) -> str:
    """Return the resource path of the SVG icon named ``icon_name``."""
    return f"{ICON_PATH_PREFIX}{icon_name}.svg"


def is_resource_path_valid(resource_path: str | Path) -> bool:
    """True if a file exists at ``resource_path``."""
    return Path(resource_path).exists()