"""Capitalization helpers."""

__all__ = [
    "capitalize",
    "cap_words",
]

from .splitting import unwords, words


def capitalize(s: str) -> str:
    """
    Uppercase the first character of s, leaving the rest untouched.

    Unlike str.capitalize, the remaining characters are not lowercased.

    Example:
        >>> capitalize("hELLO")
        'HELLO'
        >>> capitalize("")
        ''
    """
    return s[:1].upper() + s[1:]


def cap_words(s: str) -> str:
    """Capitalize every space-separated word of s."""
    return unwords(capitalize(word) for word in words(s))
