"""
Character-wise higher-order operations: map, fold and traverse.
"""

__all__ = [
    "char_map",
    "char_fold",
    "char_traverse",
]

from functools import reduce
from typing import Any, Callable, TypeVar

from textprims.combinators.applicative import OPTIONAL, Applicative

A = TypeVar("A")


def char_map(func: Callable[[str], str], s: str) -> str:
    """
    Apply func to every character of s, keeping order.

    Length is preserved as long as func maps each character to one character.

    Example:
        >>> char_map(str.upper, "abc")
        'ABC'
    """
    return "".join(map(func, s))


def char_fold(func: Callable[[A, str], A], initial: A, s: str) -> A:
    """
    Left-fold the characters of s.

    Args:
        func: Combining function called as func(accumulator, char)
        initial: Starting accumulator, returned as is for an empty s
        s: Input string

    Returns:
        Final accumulator

    Example:
        >>> char_fold(lambda n, c: n + (c == "a"), 0, "banana")
        3
    """
    return reduce(func, s, initial)


def char_traverse(
    func: Callable[[str], Any],
    s: str,
    applicative: Applicative = OPTIONAL,
) -> Any:
    """
    Apply an effectful func to every character and collect the results.

    func returns each new character wrapped in the applicative context.
    Effects run left to right. The first failure (as judged by the context)
    stops the traversal and is returned; no partial string is produced and
    func is not called on the remaining characters.

    Args:
        func: Character to wrapped character
        s: Input string
        applicative: Effect context (defaults to None-as-failure)

    Returns:
        The rebuilt string wrapped in the context, or the failure

    Example:
        >>> char_traverse(lambda c: c.upper() if c.isalpha() else None, "abc")
        'ABC'
        >>> char_traverse(lambda c: c.upper() if c.isalpha() else None, "a1c") is None
        True
    """
    result = applicative.pure("")
    for char in s:
        wrapped = func(char)
        if applicative.is_failure(wrapped):
            return wrapped
        result = applicative.map2(result, wrapped, lambda acc, c: acc + c)
    return result
