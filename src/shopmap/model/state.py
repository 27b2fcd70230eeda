"""
Shop Map State (Data Model)
===========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the 60-slot shop layout in one place and is
   the only object allowed to change it.
2. Notification: Views subscribe to `slots_changed` instead of polling.
3. Decoupling: Views read snapshots from this object; user actions and the
   import code write to it through its methods.

The instance is created by the bootstrap (`shopmap.main`) and passed to the
main window. It is not a global.

Classes:
    ShopMapState: The slot container.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from shopmap.config import GRID_SIZE
from shopmap.model.errors import (
    BlankItemError,
    FormatError,
    IndexOutOfRange,
    InvalidStateTransition,
)
from shopmap.model.shelf import Shelf

logger = logging.getLogger(__name__)

Slots = Tuple[Optional[Shelf], ...]


def empty_slots() -> Slots:
    return (None,) * GRID_SIZE


class ShopMapState(QObject):
    """
    Holds the shop layout as an immutable tuple of GRID_SIZE slots.
    Every mutation swaps the tuple and emits `slots_changed` with the new one.
    """
    slots_changed = Signal(object)

    def __init__(self, slots: Optional[Iterable[Optional[Shelf]]] = None) -> None:
        super().__init__()
        self._slots: Slots = empty_slots()
        if slots is not None:
            self._slots = self._validated(slots)

    # --- READ ---

    def observe(self) -> Slots:
        """Current snapshot. Safe to keep; later mutations do not touch it."""
        return self._slots

    def shelf_at(self, index: int) -> Optional[Shelf]:
        self._check_index(index)
        return self._slots[index]

    def occupied_count(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)

    # --- MUTATIONS ---

    def occupy_slot(self, index: int) -> Shelf:
        self._check_index(index)
        if self._slots[index] is not None:
            raise InvalidStateTransition(f"Slot {index} is already occupied.")

        shelf = Shelf.create(index)
        self._store(index, shelf)
        logger.debug(f"Slot {index} occupied by '{shelf.name}'.")
        return shelf

    def add_item(self, index: int, text: str) -> Shelf:
        self._check_index(index)
        shelf = self._slots[index]
        if shelf is None:
            raise InvalidStateTransition(f"Slot {index} is empty, cannot add items.")
        if not isinstance(text, str) or not text.strip():
            raise BlankItemError("Item text must not be blank.")

        updated = shelf.with_item(text)
        self._store(index, updated)
        logger.debug(f"Added '{text}' to '{updated.name}' ({len(updated.items)} items).")
        return updated

    def replace_all(self, new_slots: Iterable[Optional[Shelf]]) -> None:
        """Swap the whole layout. Nothing changes if validation fails."""
        self._slots = self._validated(new_slots)
        logger.info(f"Layout replaced ({self.occupied_count()} shelves).")
        self.slots_changed.emit(self._slots)

    def reset(self) -> None:
        """Clear all slots for a new layout"""
        self._slots = empty_slots()
        logger.info("Shop map state has been reset.")
        self.slots_changed.emit(self._slots)

    # --- HELPERS ---

    def _store(self, index: int, shelf: Shelf) -> None:
        slots = list(self._slots)
        slots[index] = shelf
        self._slots = tuple(slots)
        self.slots_changed.emit(self._slots)

    @staticmethod
    def _check_index(index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRange(f"Slot index must be an integer, got {index!r}.")
        if not 0 <= index < GRID_SIZE:
            raise IndexOutOfRange(f"Slot index {index} is outside 0..{GRID_SIZE - 1}.")

    @staticmethod
    def _validated(slots: Iterable[Optional[Shelf]]) -> Slots:
        candidate = tuple(slots)
        if len(candidate) != GRID_SIZE:
            raise FormatError(f"Expected {GRID_SIZE} slots, got {len(candidate)}.")
        for position, slot in enumerate(candidate):
            if slot is not None and not isinstance(slot, Shelf):
                raise FormatError(f"Slot {position} holds {type(slot).__name__}, expected Shelf or None.")
        return candidate
