"""
Configuration & Path Management
===============================
This module serves as the central registry for grid constants, file names
and the few user settings the application remembers between sessions.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (grid size, colors) and hardcoded
   paths scattered throughout the code.
2. Deployment: It resolves the per-user cache directory through Qt, so the
   staged export file lands in the right place on every platform.

Exports:
    GRID_SIZE (int): Number of slots in the shop layout.
    GRID_COLUMNS (int): Number of columns the grid is rendered with.
    DEFAULT_SHELF_COLOR (int): ARGB color given to every new shelf.
"""
import logging
import os
import tempfile

from PySide6.QtCore import QSettings, QStandardPaths

logger = logging.getLogger(__name__)

# Global Constants
GRID_SIZE: int = 60
GRID_COLUMNS: int = 6

DEFAULT_SHELF_COLOR: int = 0xFFB2DFDB
EMPTY_SLOT_COLOR: int = 0xFFD3D3D3

SHELF_NAME_TEMPLATE: str = "Shelf {number}"

SHARE_FILENAME: str = "shop_map.json"
JSON_FILE_FILTER: str = "JSON Files (*.json)"

LAST_DIRECTORY_KEY: str = "ui/last_directory"


def get_cache_dir() -> str:
    """
    Get the per-user cache directory, creating it if needed.
    Falls back to the system temp dir when Qt cannot resolve one.
    """
    cache_dir = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.CacheLocation)
    if not cache_dir:
        cache_dir = tempfile.gettempdir()

    os.makedirs(cache_dir, exist_ok=True)
    return cache_dir


def get_last_directory() -> str:
    """Directory of the last imported/exported file, or empty string."""
    value = QSettings().value(LAST_DIRECTORY_KEY, "", type=str)
    if value and os.path.isdir(value):
        return value
    return ""


def set_last_directory(filepath: str) -> None:
    directory = filepath if os.path.isdir(filepath) else os.path.dirname(filepath)
    QSettings().setValue(LAST_DIRECTORY_KEY, directory)
    logger.debug(f"Remembered last directory: {directory}")
