"""
Literal substring substitution, repeated until nothing changes.
"""

__all__ = [
    "substitute",
    "substitute_many",
]

from typing import Iterable, Optional

from textprims.combinators.fixed_point import FixedPointConfig, fixed_point


def substitute(
    old: str,
    new: str,
    s: str,
    config: Optional[FixedPointConfig] = None,
) -> str:
    """
    Replace every occurrence of old with new until no pass changes s.

    Each pass is a global, non-overlapping literal replace. Passes repeat
    while they change the string, so occurrences of old created by a pass
    are replaced too. When new contains old the search may never end;
    pass FixedPointConfig(max_passes=...) to bound it.

    Args:
        old: Substring to replace (empty means s is returned unchanged)
        new: Replacement
        s: Input string
        config: Fixed-point search configuration (unbounded by default)

    Returns:
        s with no occurrence of old left, or s itself if old is empty

    Raises:
        FixedPointNotReachedError: If config caps the passes and they run out

    Example:
        >>> substitute("ab", "x", "abab")
        'xx'
        >>> substitute("a", "", "banana")
        'bnn'
        >>> substitute("aa", "a", "aaaa")
        'a'
    """
    # str.replace inserts new between every character for an empty pattern.
    if not old:
        return s
    return fixed_point(lambda text: text.replace(old, new), s, config=config)


def substitute_many(
    pairs: Iterable[tuple[str, str]],
    s: str,
    config: Optional[FixedPointConfig] = None,
) -> str:
    """
    Apply substitute for each (old, new) pair, in order.

    Each substitution runs on the result of the previous one, so the order
    of pairs matters.

    Args:
        pairs: (old, new) pairs, applied left to right
        s: Input string
        config: Fixed-point search configuration for every substitution

    Returns:
        s after all substitutions

    Example:
        >>> substitute_many([("a", "1"), ("1", "2")], "a")
        '2'
        >>> substitute_many([("1", "2"), ("a", "1")], "a")
        '1'
    """
    for old, new in pairs:
        s = substitute(old, new, s, config=config)
    return s
