"""
The MODEL layer contains the shop layout data structures and their I/O.
It only uses QtCore/QtGui value types and signals, never widgets.
"""
from shopmap.model.errors import (
    BlankItemError,
    FormatError,
    IndexOutOfRange,
    InvalidStateTransition,
    ShopMapError,
)
from shopmap.model.shelf import Shelf
from shopmap.model.state import ShopMapState

__all__ = [
    "BlankItemError",
    "FormatError",
    "IndexOutOfRange",
    "InvalidStateTransition",
    "ShopMapError",
    "Shelf",
    "ShopMapState",
]
