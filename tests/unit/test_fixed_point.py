"""
Unit tests for the fixed-point combinator.
"""

import pytest

from textprims.combinators import FixedPointConfig, fixed_point
from textprims.errors import FixedPointNotReachedError


class TestFixedPoint:
    """Tests for fixed_point."""

    def test_numeric(self):
        """Halving reaches zero."""
        assert fixed_point(lambda n: n // 2, 40) == 0

    def test_already_fixed(self):
        """A value that is already fixed is returned as is."""
        assert fixed_point(lambda s: s.strip(), "abc") == "abc"

    def test_custom_equivalence(self):
        """The equivalence decides when to stop."""
        result = fixed_point(
            lambda x: x / 2,
            1.0,
            eq=lambda a, b: abs(a - b) < 0.01,
        )
        assert result < 0.02

    def test_cap_raises(self):
        """Running out of passes raises with the last value."""
        with pytest.raises(FixedPointNotReachedError) as excinfo:
            fixed_point(lambda n: n + 1, 0, config=FixedPointConfig(max_passes=3))
        assert excinfo.value.passes == 3
        assert excinfo.value.last == 3

    def test_cap_allows_confirming_pass(self):
        """A fixed point found on the last allowed pass is returned."""
        config = FixedPointConfig(max_passes=2)
        assert fixed_point(lambda n: min(n + 1, 1), 0, config=config) == 1

    def test_logs_debug(self, log_messages):
        """Reaching a fixed point is logged at debug level."""
        fixed_point(lambda n: n // 2, 4)
        assert any(
            r["level"].name == "DEBUG" and "4 passes" in r["message"]
            for r in log_messages
        )

    def test_logs_warning_on_cap(self, log_messages):
        """Giving up is logged as a warning."""
        with pytest.raises(FixedPointNotReachedError):
            fixed_point(lambda n: n + 1, 0, config=FixedPointConfig(max_passes=1))
        assert any(r["level"].name == "WARNING" for r in log_messages)


class TestFixedPointConfig:
    """Tests for FixedPointConfig."""

    def test_default_unbounded(self):
        """The default never runs out."""
        assert not FixedPointConfig().exhausted(10**9)

    def test_bounded(self):
        """A cap is exhausted once the pass count reaches it."""
        config = FixedPointConfig(max_passes=2)
        assert not config.exhausted(1)
        assert config.exhausted(2)
