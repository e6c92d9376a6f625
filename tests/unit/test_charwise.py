"""
Unit tests for character-wise map, fold and traverse.
"""

from textprims.combinators import LIST, OPTIONAL
from textprims.text import char_fold, char_map, char_traverse


def _upper_letters_only(char):
    return char.upper() if char.isalpha() else None


class TestCharMap:
    """Tests for char_map."""

    def test_maps_each_character(self):
        """func is applied to every character in order."""
        assert char_map(str.upper, "abc") == "ABC"

    def test_preserves_length(self, sample_strings):
        """A one-to-one func keeps the length."""
        for s in sample_strings:
            assert len(char_map(lambda c: "*", s)) == len(s)

    def test_empty(self):
        """Mapping the empty string gives the empty string."""
        assert char_map(str.upper, "") == ""


class TestCharFold:
    """Tests for char_fold."""

    def test_counts(self):
        """The accumulator sees every character."""
        assert char_fold(lambda n, c: n + (c == "a"), 0, "banana") == 3

    def test_left_to_right(self):
        """Characters are folded from the left."""
        assert char_fold(lambda acc, c: [*acc, c], [], "abc") == ["a", "b", "c"]
        assert char_fold(lambda acc, c: c + acc, "", "abc") == "cba"

    def test_empty_returns_initial(self):
        """An empty string returns the initial accumulator unchanged."""
        marker = object()
        assert char_fold(lambda acc, c: acc, marker, "") is marker


class TestCharTraverseOptional:
    """Tests for char_traverse in the None-as-failure context."""

    def test_all_present(self):
        """Present results are reassembled into a string."""
        assert char_traverse(_upper_letters_only, "abc") == "ABC"

    def test_one_absent_fails(self):
        """A single absent result fails the whole traversal."""
        assert char_traverse(_upper_letters_only, "a1c") is None

    def test_empty(self):
        """Traversing the empty string gives the pure empty string."""
        assert char_traverse(_upper_letters_only, "") == ""

    def test_short_circuits(self):
        """func is not called after the first failure."""
        seen = []

        def record(char):
            seen.append(char)
            return None if char == "x" else char

        assert char_traverse(record, "abxcd", OPTIONAL) is None
        assert seen == ["a", "b", "x"]


class TestCharTraverseList:
    """Tests for char_traverse in the list context."""

    def test_all_combinations(self):
        """Every combination is produced in left-to-right order."""
        result = char_traverse(lambda c: [c.lower(), c.upper()], "ab", LIST)
        assert result == ["ab", "aB", "Ab", "AB"]

    def test_single_choice(self):
        """Singleton results give a singleton list."""
        assert char_traverse(lambda c: [c], "abc", LIST) == ["abc"]

    def test_empty_choice_fails(self):
        """An empty list of results fails the traversal."""
        assert char_traverse(lambda c: [] if c == "b" else [c], "abc", LIST) == []

    def test_empty_input(self):
        """Traversing the empty string gives the pure empty string."""
        assert char_traverse(lambda c: [c], "", LIST) == [""]


class TestCharTraverseCustom:
    """Tests for char_traverse with a caller-supplied context."""

    def test_result_context(self):
        """A caller-defined error context short-circuits on its own terms."""

        class Err:
            def __init__(self, reason):
                self.reason = reason

        class ResultApplicative:
            def pure(self, value):
                return ("ok", value)

            def map2(self, fa, fb, fn):
                return ("ok", fn(fa[1], fb[1]))

            def is_failure(self, fa):
                return isinstance(fa, Err)

        def check(char):
            return Err(f"bad {char!r}") if char.isdigit() else ("ok", char)

        context = ResultApplicative()
        assert char_traverse(check, "ab", context) == ("ok", "ab")
        failure = char_traverse(check, "a7", context)
        assert isinstance(failure, Err)
        assert failure.reason == "bad '7'"
