"""
IsString capability - build values of other types from string literals.

Built-in instances exist for str (identity) and list (one element per
character). Other types take part either by defining a from_string
classmethod or by registering a converter with @register_is_string.
"""

__all__ = [
    "IsString",
    "from_string",
    "register_is_string",
]

from typing import Any, Callable, Protocol, TypeVar, get_origin, runtime_checkable

from textprims.errors import UnsupportedTargetError

T = TypeVar("T")

_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: lambda s: s,
    list: list,
}


@runtime_checkable
class IsString(Protocol):
    """Types that can be built from a string literal."""

    @classmethod
    def from_string(cls, s: str) -> Any: ...


def register_is_string(
    target: type,
) -> Callable[[Callable[[str], Any]], Callable[[str], Any]]:
    """
    Register a converter from str to target.

    Args:
        target: Type the decorated converter builds

    Returns:
        Decorator that records the converter and returns it unchanged

    Example:
        >>> @register_is_string(tuple)
        ... def tuple_from_string(s):
        ...     return tuple(s)
        >>> from_string(tuple, "ab")
        ('a', 'b')
    """

    def decorator(converter: Callable[[str], Any]) -> Callable[[str], Any]:
        _CONVERTERS[target] = converter
        return converter

    return decorator


def from_string(target: type[T], s: str) -> T:
    """
    Convert a string literal into a value of type target.

    Args:
        target: Destination type
        s: String literal

    Returns:
        s converted to target

    Raises:
        UnsupportedTargetError: If target has no IsString instance

    Example:
        >>> from_string(str, "hi")
        'hi'
        >>> from_string(list, "hi")
        ['h', 'i']
    """
    # Parametrized generics such as TaggedString[Email] resolve to their class.
    target = get_origin(target) or target
    # Registered converters win over the target's own classmethod.
    converter = _CONVERTERS.get(target)
    if converter is not None:
        return converter(s)
    if isinstance(target, type) and issubclass(target, IsString):
        return target.from_string(s)
    raise UnsupportedTargetError(target)
