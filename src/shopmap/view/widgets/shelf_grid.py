"""
Shelf Grid
Renders the shop layout as a fixed grid of square tiles.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import Signal, QSize
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QWidget, QGridLayout, QPushButton, QSizePolicy

from shopmap.config import GRID_COLUMNS, GRID_SIZE, EMPTY_SLOT_COLOR
from shopmap.model.shelf import Shelf, argb_to_qcolor
from shopmap.model.state import ShopMapState, Slots

logger = logging.getLogger(__name__)


class SlotTile(QPushButton):
    """A single square slot. Text is the shelf name, or nothing when empty."""

    def __init__(self, index: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.index = index
        self.setMinimumSize(QSize(64, 64))
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.set_shelf(None)

    def heightForWidth(self, width: int) -> int:
        return width

    def hasHeightForWidth(self) -> bool:
        return True

    def set_shelf(self, shelf: Optional[Shelf]) -> None:
        if shelf is None:
            color = argb_to_qcolor(EMPTY_SLOT_COLOR)
            self.setText("")
            self.setToolTip(f"Empty slot {self.index + 1}")
        else:
            color = shelf.qcolor()
            self.setText(shelf.name)
            self.setToolTip(f"{shelf.name} ({len(shelf.items)} items)")

        # Dark text on light tiles, light text on dark ones
        text_color = "black" if color.lightness() > 127 else "white"
        self.setStyleSheet(
            f"QPushButton {{ background-color: {color.name(QColor.HexArgb)};"
            f" color: {text_color}; border-radius: 8px; border: none; }}"
            f"QPushButton:hover {{ border: 2px solid #808080; }}"
        )


class ShelfGridWidget(QWidget):
    # Emitted with the slot index when the user clicks an empty tile
    empty_slot_clicked = Signal(int)
    # Emitted with the slot index when the user clicks an occupied tile
    shelf_clicked = Signal(int)

    def __init__(self, state: ShopMapState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.state = state
        self._snapshot: Slots = state.observe()

        layout = QGridLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self.tiles: List[SlotTile] = []
        for index in range(GRID_SIZE):
            tile = SlotTile(index, self)
            # Bind index now, the lambda would otherwise see the last value
            tile.clicked.connect(lambda _checked=False, i=index: self._on_tile_clicked(i))
            row, col = divmod(index, GRID_COLUMNS)
            layout.addWidget(tile, row, col)
            self.tiles.append(tile)

        # --- SIGNAL CONNECTIONS ---
        self.state.slots_changed.connect(self.render)

        self.render(self._snapshot)

    def render(self, snapshot: Slots) -> None:
        """Redraw every tile from a state snapshot."""
        self._snapshot = snapshot
        for tile, shelf in zip(self.tiles, snapshot):
            tile.set_shelf(shelf)

    # --- SLOTS ---

    def _on_tile_clicked(self, index: int) -> None:
        if self._snapshot[index] is None:
            logger.debug(f"Empty slot {index} clicked.")
            self.empty_slot_clicked.emit(index)
        else:
            self.shelf_clicked.emit(index)
