"""
Exceptions raised by textprims.

String operations themselves never raise; these cover the opt-in pass cap
of the fixed-point combinator and conversions to unsupported targets.
"""

__all__ = [
    "TextPrimsError",
    "FixedPointNotReachedError",
    "UnsupportedTargetError",
]

from typing import Any


class TextPrimsError(Exception):
    """Base class for textprims errors."""


class FixedPointNotReachedError(TextPrimsError):
    """Raised when a capped fixed-point search runs out of passes."""

    def __init__(self, passes: int, last: Any):
        self.passes = passes
        self.last = last
        super().__init__(f"No fixed point reached after {passes} passes")


class UnsupportedTargetError(TextPrimsError, TypeError):
    """Raised when a string literal cannot be converted to the requested type."""

    def __init__(self, target: Any):
        self.target = target
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"No IsString instance for {name}")
