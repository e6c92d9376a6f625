"""
Applicative effect contexts for traversals.

An applicative wraps values in some context (optionality, multiple results,
...) and knows how to combine two wrapped values left-to-right. Used by
char_traverse; callers can supply their own instances.
"""

__all__ = [
    "Applicative",
    "OptionalApplicative",
    "ListApplicative",
    "OPTIONAL",
    "LIST",
]

from itertools import product
from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Applicative(Protocol):
    """Minimal applicative interface: pure, map2 and failure detection."""

    def pure(self, value: Any) -> Any:
        """Wrap a plain value in the context."""
        ...

    def map2(self, fa: Any, fb: Any, fn: Callable[[Any, Any], Any]) -> Any:
        """Run fa then fb and combine their values with fn."""
        ...

    def is_failure(self, fa: Any) -> bool:
        """Check if a wrapped value short-circuits the computation."""
        ...


class OptionalApplicative:
    """
    None-as-failure context.

    A present value is the value itself, absence is None.

    Example:
        >>> OPTIONAL.map2("a", "b", lambda x, y: x + y)
        'ab'
        >>> OPTIONAL.map2("a", None, lambda x, y: x + y) is None
        True
    """

    def pure(self, value: Any) -> Any:
        return value

    def map2(
        self, fa: Optional[Any], fb: Optional[Any], fn: Callable[[Any, Any], Any]
    ) -> Optional[Any]:
        if fa is None or fb is None:
            return None
        return fn(fa, fb)

    def is_failure(self, fa: Optional[Any]) -> bool:
        return fa is None


class ListApplicative:
    """
    Non-deterministic context: a list of every possible result.

    map2 combines every left result with every right result, left-major.
    An empty list has no results and short-circuits.

    Example:
        >>> LIST.map2(["a", "b"], ["x", "y"], lambda x, y: x + y)
        ['ax', 'ay', 'bx', 'by']
    """

    def pure(self, value: Any) -> list:
        return [value]

    def map2(self, fa: list, fb: list, fn: Callable[[Any, Any], Any]) -> list:
        return [fn(a, b) for a, b in product(fa, fb)]

    def is_failure(self, fa: list) -> bool:
        return not fa


OPTIONAL = OptionalApplicative()
LIST = ListApplicative()
