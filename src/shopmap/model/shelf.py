"""
Shelf Record
============
Defines the data stored in an occupied slot of the shop layout.

Shelf instances are frozen: a mutation of the grid always swaps a record for
a new one, so snapshots handed to the view never change under its hands.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple

from PySide6.QtGui import QColor

from shopmap.config import DEFAULT_SHELF_COLOR, SHELF_NAME_TEMPLATE

ARGB_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Shelf:
    index: int
    name: str
    color: int = DEFAULT_SHELF_COLOR
    items: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # A list passed in by the caller would stay mutable behind the snapshot
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def create(cls, index: int) -> Shelf:
        """New shelf for the given slot with a derived name and default color."""
        return cls(
            index=index,
            name=default_shelf_name(index),
            color=DEFAULT_SHELF_COLOR,
            items=(),
        )

    def with_item(self, text: str) -> Shelf:
        return replace(self, items=self.items + (text,))

    def qcolor(self) -> QColor:
        return argb_to_qcolor(self.color)

    def to_dict(self) -> Dict[str, Any]:
        # Explicit key order keeps exported files stable
        return {
            "index": self.index,
            "name": self.name,
            "color": self.color,
            "items": list(self.items),
        }


def default_shelf_name(index: int) -> str:
    """Slots are 0-based, shelf names are 1-based."""
    return SHELF_NAME_TEMPLATE.format(number=index + 1)


def argb_to_qcolor(argb: int) -> QColor:
    return QColor.fromRgba(argb & ARGB_MAX)


def qcolor_to_argb(color: QColor) -> int:
    return color.rgba() & ARGB_MAX
