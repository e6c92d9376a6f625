"""
Splitting and joining on newlines and spaces.

Splitting keeps empty segments: every leading, trailing or doubled
separator produces an empty string. Joining adds no trailing separator.
"""

__all__ = [
    "lines",
    "unlines",
    "words",
    "unwords",
]

from typing import Iterable

_NEWLINE = "\n"
_SPACE = " "


def lines(s: str) -> list[str]:
    """
    Split s on newline characters.

    Args:
        s: Input string

    Returns:
        Segments between newlines, empty segments included

    Example:
        >>> lines("a\\n\\nb")
        ['a', '', 'b']
        >>> lines("a\\n")
        ['a', '']
    """
    return s.split(_NEWLINE)


def unlines(items: Iterable[str]) -> str:
    """Join strings with a newline between consecutive items."""
    return _NEWLINE.join(items)


def words(s: str) -> list[str]:
    """
    Split s on single space characters.

    Tabs and other whitespace are not separators.

    Example:
        >>> words("the  fox")
        ['the', '', 'fox']
    """
    return s.split(_SPACE)


def unwords(items: Iterable[str]) -> str:
    """Join strings with a single space between consecutive items."""
    return _SPACE.join(items)
