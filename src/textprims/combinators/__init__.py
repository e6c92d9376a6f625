"""
Shared combinators subpackage - fixed-point iteration and effect contexts.
"""

from textprims.combinators.fixed_point import (
    fixed_point,
    FixedPointConfig,
)

from textprims.combinators.applicative import (
    Applicative,
    OptionalApplicative,
    ListApplicative,
    OPTIONAL,
    LIST,
)

__all__ = [
    # fixed_point
    "fixed_point",
    "FixedPointConfig",
    # applicative
    "Applicative",
    "OptionalApplicative",
    "ListApplicative",
    "OPTIONAL",
    "LIST",
]
