"""
Tagged strings - plain strings carrying a type-level label.

TaggedString[T] has the same runtime representation for every T. The tag only
lets type checkers tell, say, a validated email from a raw string.
"""

__all__ = [
    "TaggedString",
    "tag",
    "run_tag",
    "append",
    "mconcat",
]

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class TaggedString(Generic[T]):
    """
    A string wrapped under a phantom tag T.

    Equality and ordering compare the wrapped value. Two tagged strings of the
    same tag concatenate with +, and TaggedString.empty() is the identity.

    Example:
        >>> class Email: ...
        >>> address: TaggedString[Email] = tag("a@b.org")
        >>> address + tag(".uk")
        TaggedString(value='a@b.org.uk')
    """

    value: str = ""

    @classmethod
    def empty(cls) -> "TaggedString[T]":
        """Return the empty tagged string, the identity of +."""
        return cls("")

    @classmethod
    def from_string(cls, s: str) -> "TaggedString[T]":
        return cls(s)

    def __add__(self, other: "TaggedString[T]") -> "TaggedString[T]":
        if not isinstance(other, TaggedString):
            return NotImplemented
        return TaggedString(self.value + other.value)


def tag(s: str) -> TaggedString[T]:
    """Wrap a string under a tag without changing it."""
    return TaggedString(s)


def run_tag(ts: TaggedString[T]) -> str:
    """Unwrap a tagged string, returning the original value."""
    return ts.value


def append(a: TaggedString[T], b: TaggedString[T]) -> TaggedString[T]:
    """Concatenate two tagged strings of the same tag."""
    return a + b


def mconcat(items: Iterable[TaggedString[T]]) -> TaggedString[T]:
    """
    Concatenate tagged strings in order.

    Args:
        items: Tagged strings sharing one tag

    Returns:
        Their concatenation, or the empty tagged string for no items

    Example:
        >>> mconcat([tag("ab"), tag("c")])
        TaggedString(value='abc')
    """
    return TaggedString("".join(ts.value for ts in items))
