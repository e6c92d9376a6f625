"""
Whole-string transforms: reversal and replication.

Both operate on code points, not grapheme clusters: reversing text with
combining marks moves the marks onto other characters.
"""

__all__ = [
    "reverse",
    "replicate",
]


def reverse(s: str) -> str:
    """
    Reverse the characters of s.

    Example:
        >>> reverse("abc")
        'cba'
    """
    return s[::-1]


def replicate(n: int, c: str) -> str:
    """
    Build a string of n copies of c.

    Args:
        n: Number of copies
        c: Character to repeat

    Returns:
        c repeated n times, or "" if n <= 0

    Example:
        >>> replicate(4, "x")
        'xxxx'
    """
    return c * max(n, 0)
