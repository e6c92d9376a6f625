"""
Fixed-point iteration - apply a function until its output stops changing.

Generic combinator used by substitution, usable with any value type.
"""

__all__ = [
    "fixed_point",
    "FixedPointConfig",
]

import operator
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from loguru import logger

from textprims.errors import FixedPointNotReachedError

T = TypeVar("T")


@dataclass(frozen=True)
class FixedPointConfig:
    """Configuration for fixed-point search."""

    # None searches without bound; the search may never terminate.
    max_passes: Optional[int] = None

    def exhausted(self, passes: int) -> bool:
        """Check if the given number of passes uses up the budget."""
        return self.max_passes is not None and passes >= self.max_passes


def fixed_point(
    func: Callable[[T], T],
    value: T,
    eq: Callable[[T, T], bool] = operator.eq,
    config: Optional[FixedPointConfig] = None,
) -> T:
    """
    Apply func repeatedly until the result is equivalent to its input.

    Args:
        func: Single-argument function to iterate
        value: Starting value
        eq: Equivalence used to detect the fixed point
        config: Search configuration (defaults to an unbounded search)

    Returns:
        The first value x in the iteration for which eq(x, func(x)) holds

    Raises:
        FixedPointNotReachedError: If config.max_passes is set and no fixed
            point is found within that many applications of func

    Example:
        >>> fixed_point(lambda n: n // 2, 40)
        0
        >>> fixed_point(lambda s: s.replace("aa", "a"), "caaaat")
        'cat'
    """
    if config is None:
        config = FixedPointConfig()

    passes = 0
    while True:
        result = func(value)
        passes += 1
        if eq(value, result):
            logger.debug(f"Fixed point reached after {passes} passes")
            return value
        value = result

        if config.exhausted(passes):
            logger.warning(f"Giving up on fixed point after {passes} passes")
            raise FixedPointNotReachedError(passes, value)
