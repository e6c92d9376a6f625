"""
Safe string access - no function here raises.

Every accessor returns None where plain indexing or slicing would fail or
silently wrap around. A present empty string ("") is not the same as None.
"""

__all__ = [
    "head",
    "last",
    "tail",
    "init",
    "index",
]

from typing import Optional


def head(s: str) -> Optional[str]:
    """
    Return the first character of s.

    Args:
        s: Input string

    Returns:
        First character, or None if s is empty

    Example:
        >>> head("abc")
        'a'
        >>> head("") is None
        True
    """
    if not s:
        return None
    return s[0]


def last(s: str) -> Optional[str]:
    """Return the last character of s, or None if s is empty."""
    if not s:
        return None
    return s[-1]


def tail(s: str) -> Optional[str]:
    """
    Return s without its first character.

    Args:
        s: Input string

    Returns:
        Everything after the first character, or None if s is empty

    Example:
        >>> tail("abc")
        'bc'
        >>> tail("a")
        ''
    """
    if not s:
        return None
    return s[1:]


def init(s: str) -> Optional[str]:
    """Return s without its last character, or None if s is empty."""
    if not s:
        return None
    return s[:-1]


def index(s: str, i: int) -> Optional[str]:
    """
    Return the character at 0-based position i.

    Negative positions are out of range; they do not count from the end.

    Args:
        s: Input string
        i: Position

    Returns:
        Character at i, or None if i < 0 or i >= len(s)

    Example:
        >>> index("abc", 1)
        'b'
        >>> index("abc", -1) is None
        True
    """
    if 0 <= i < len(s):
        return s[i]
    return None
