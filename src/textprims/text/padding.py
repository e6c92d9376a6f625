"""Space padding."""

__all__ = [
    "rightpad",
    "leftpad",
    "rightpad_by",
    "leftpad_by",
]

_PAD = " "


def rightpad(s: str) -> str:
    """Append one space."""
    return s + _PAD


def leftpad(s: str) -> str:
    """Prepend one space."""
    return _PAD + s


def rightpad_by(n: int, s: str) -> str:
    """Append n spaces (none if n <= 0)."""
    return s + _PAD * max(n, 0)


def leftpad_by(n: int, s: str) -> str:
    """Prepend n spaces (none if n <= 0)."""
    return _PAD * max(n, 0) + s
