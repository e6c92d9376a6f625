"""
Construction subpackage - strings from characters.
"""

from textprims.construct.chars import (
    from_chars,
    cons,
    snoc,
    char_range,
)

__all__ = [
    "from_chars",
    "cons",
    "snoc",
    "char_range",
]
