"""
Access subpackage - total accessors returning None instead of raising.
"""

from textprims.access.safe import (
    head,
    last,
    tail,
    init,
    index,
)

__all__ = [
    "head",
    "last",
    "tail",
    "init",
    "index",
]
