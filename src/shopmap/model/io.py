"""
Input/Output Manager (JSON)
Converts the shop layout to and from the JSON exchange format and handles
the files used to import, export and stage a layout for sharing.
"""
from __future__ import annotations

import json
import logging
import os
import shutil
from typing import Any, Optional, Sequence

from shopmap.config import GRID_SIZE, SHARE_FILENAME, get_cache_dir
from shopmap.model.errors import FormatError
from shopmap.model.shelf import ARGB_MAX, Shelf
from shopmap.model.state import ShopMapState, Slots

# Get module logger
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("index", "name", "color", "items")


class ExchangeManager:
    # Track staged share files created during the session
    _TEMP_FILES: list[str] = []

    # ---- FORMAT ----

    @staticmethod
    def serialize(slots: Sequence[Optional[Shelf]]) -> str:
        if len(slots) != GRID_SIZE:
            raise FormatError(f"Expected {GRID_SIZE} slots, got {len(slots)}.")

        data = [shelf.to_dict() if shelf is not None else None for shelf in slots]
        return json.dumps(data, ensure_ascii=False, indent=2)

    @staticmethod
    def deserialize(text: str) -> Slots:
        # JSONDecodeError is a ValueError; oversized int literals raise a plain
        # ValueError and deep nesting a RecursionError
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise FormatError(f"Not a valid JSON document: {e}") from e

        if not isinstance(data, list):
            raise FormatError(f"Top-level value must be an array, got {type(data).__name__}.")
        if len(data) != GRID_SIZE:
            raise FormatError(f"Expected {GRID_SIZE} slots, got {len(data)}.")

        slots = []
        for position, element in enumerate(data):
            if element is None:
                slots.append(None)
            else:
                slots.append(ExchangeManager._shelf_from_json(position, element))
        return tuple(slots)

    @staticmethod
    def _shelf_from_json(position: int, element: Any) -> Shelf:
        if not isinstance(element, dict):
            raise FormatError(f"Slot {position}: expected object or null, got {type(element).__name__}.")

        missing = [key for key in REQUIRED_FIELDS if key not in element]
        if missing:
            raise FormatError(f"Slot {position}: missing field(s) {', '.join(missing)}.")

        index = element["index"]
        name = element["name"]
        color = element["color"]
        items = element["items"]

        # bool is an int subclass, json true/false must not pass as numbers
        if isinstance(index, bool) or not isinstance(index, int):
            raise FormatError(f"Slot {position}: 'index' must be an integer.")
        if not isinstance(name, str):
            raise FormatError(f"Slot {position}: 'name' must be a string.")
        if isinstance(color, bool) or not isinstance(color, int):
            raise FormatError(f"Slot {position}: 'color' must be an integer.")
        if not 0 <= color <= ARGB_MAX:
            raise FormatError(f"Slot {position}: 'color' {color} is not a 32-bit ARGB value.")
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            raise FormatError(f"Slot {position}: 'items' must be an array of strings.")

        if index != position:
            logger.warning(f"Slot {position} holds shelf '{name}' declaring index {index}; kept as-is.")

        return Shelf(index=index, name=name, color=color, items=tuple(items))

    # ---- FILES ----

    @staticmethod
    def import_from_file(state: ShopMapState, filepath: str) -> None:
        logger.info(f"Importing layout from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            logger.error(f"File '{filepath}' is not UTF-8 text: {e}")
            raise FormatError(f"File '{filepath}' is not UTF-8 text.") from e
        except OSError as e:
            logger.exception(f"Failed to read layout file: {e}")
            raise e

        try:
            slots = ExchangeManager.deserialize(text)
        except FormatError as e:
            logger.error(f"Rejected layout file '{filepath}': {e}")
            raise e

        # Parsing finished before this point, the state is replaced in one step
        state.replace_all(slots)
        logger.info(f"Layout imported from: {filepath}")

    @staticmethod
    def export_to_file(state: ShopMapState, filepath: str) -> None:
        logger.info(f"Exporting layout to: {filepath}")
        try:
            text = ExchangeManager.serialize(state.observe())
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(text)
        except Exception as e:
            logger.exception(f"Failed to export layout: {e}")
            raise e

    @staticmethod
    def stage_for_share(state: ShopMapState, cache_dir: Optional[str] = None) -> str:
        """
        Writes the layout to the cache directory so it can be handed to the
        platform (copied to a destination, opened by another application).
        Returns the staged file path.
        """
        directory = cache_dir if cache_dir is not None else get_cache_dir()
        os.makedirs(directory, exist_ok=True)
        staged_path = os.path.join(directory, SHARE_FILENAME)

        ExchangeManager.export_to_file(state, staged_path)
        if staged_path not in ExchangeManager._TEMP_FILES:
            ExchangeManager._TEMP_FILES.append(staged_path)

        return staged_path

    @staticmethod
    def share_to(staged_path: str, dest_path: str) -> None:
        """
        Copies a staged file to a user-defined destination.
        """
        if not os.path.exists(staged_path):
            raise FileNotFoundError(f"Staged layout file not found: {staged_path}")

        try:
            shutil.copy2(staged_path, dest_path)
            logger.info(f"Layout shared to: {dest_path}")
        except Exception as e:
            logger.exception("Failed to copy staged layout")
            raise e

    @staticmethod
    def cleanup_temp_files() -> None:
        """Deletes all staged share files created during the session."""
        logger.info(f"Cleaning up {len(ExchangeManager._TEMP_FILES)} staged share files.")
        for temp_path in ExchangeManager._TEMP_FILES:
            try:
                if os.path.exists(temp_path):
                    os.remove(temp_path)
                    logger.debug(f"Deleted temp file: {temp_path}")
            except OSError as e:
                logger.warning(f"Could not delete temp file '{temp_path}': {e}")
        ExchangeManager._TEMP_FILES.clear()
