"""
ROT13 letter rotation.

Each ASCII letter is replaced by the letter 13 positions after it in its
own case range, wrapping around. ROT13 is its own inverse.
"""

__all__ = ["rot13"]

from textprims.text.charwise import char_map


def _rotate(char: str) -> str:
    """Rotate a single ASCII letter by 13, passing anything else through."""
    if "a" <= char <= "z":
        return chr((ord(char) - ord("a") + 13) % 26 + ord("a"))
    if "A" <= char <= "Z":
        return chr((ord(char) - ord("A") + 13) % 26 + ord("A"))
    return char


def rot13(s: str) -> str:
    """
    Apply ROT13 to s.

    Args:
        s: Input string

    Returns:
        s with ASCII letters rotated by 13, other characters unchanged

    Example:
        >>> rot13("Hello, World!")
        'Uryyb, Jbeyq!'
        >>> rot13(rot13("Hello, World!"))
        'Hello, World!'
    """
    return char_map(_rotate, s)
