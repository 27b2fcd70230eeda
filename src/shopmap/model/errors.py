"""
Error types raised by the shop map model and exchange code.
The view layer catches ShopMapError and reports it to the user.
"""


class ShopMapError(Exception):
    """Base class for all shop map errors."""


class FormatError(ShopMapError, ValueError):
    """Import text (or a replacement slot list) is malformed."""


class IndexOutOfRange(ShopMapError, IndexError):
    """A slot index outside the grid was addressed."""


class InvalidStateTransition(ShopMapError):
    """Operation does not fit the slot's current state (empty/occupied)."""


class BlankItemError(ShopMapError, ValueError):
    """Item text is empty or whitespace only."""
