"""
Building strings from characters.
"""

__all__ = [
    "from_chars",
    "cons",
    "snoc",
    "char_range",
]

from typing import Iterable


def from_chars(chars: Iterable[str]) -> str:
    """
    Concatenate characters from any iterable, in iteration order.

    Args:
        chars: Iterable of characters (list, tuple, generator, ...)

    Returns:
        The characters joined into one string; "" for an empty iterable

    Example:
        >>> from_chars(["a", "b", "c"])
        'abc'
        >>> from_chars(c for c in "xyz" if c != "y")
        'xz'
    """
    return "".join(chars)


def cons(c: str, s: str) -> str:
    """Prepend character c to s."""
    return c + s


def snoc(s: str, c: str) -> str:
    """Append character c to s."""
    return s + c


def char_range(lo: str, hi: str) -> str:
    """
    Build a string of every character from lo to hi inclusive.

    Args:
        lo: First character
        hi: Last character

    Returns:
        Characters in ascending code point order, or "" if lo > hi

    Example:
        >>> char_range("a", "e")
        'abcde'
        >>> char_range("e", "a")
        ''
    """
    return "".join(chr(code) for code in range(ord(lo), ord(hi) + 1))
