"""Tests for the replayable random number source."""

import logging

import pytest

from demandpaging.errors import RandomSequenceExhausted, RandomSourceError
from demandpaging.randsource import MAX_INT, RandomSource


class TestRandomSource:
    """Verify ordered consumption and probability derivation."""

    def test_values_in_order(self) -> None:
        """Values come back in sequence order."""
        source = RandomSource([3, 1, 4])
        assert [source.next_int() for _ in range(3)] == [3, 1, 4]
        assert source.consumed == 3
        assert source.remaining == 0

    def test_exhaustion_is_fatal(self) -> None:
        """Reading past the end raises instead of wrapping."""
        source = RandomSource([1])
        source.next_int()
        with pytest.raises(RandomSequenceExhausted):
            source.next_int()
        with pytest.raises(RandomSourceError):
            source.next_probability()

    def test_probability_range(self) -> None:
        """Probabilities stay within [0, 1)."""
        source = RandomSource([0, MAX_INT, 2**30])
        assert source.next_probability() == 0.0
        assert source.next_probability() < 1.0
        assert source.next_probability() == 0.5

    def test_probability_consumes_one_value(self) -> None:
        """Each probability advances the cursor once."""
        source = RandomSource([5, 6])
        source.next_probability()
        assert source.next_int() == 6

    def test_out_of_range_rejected(self) -> None:
        """Values outside [0, MAX_INT] are refused."""
        with pytest.raises(RandomSourceError):
            RandomSource([-1])
        with pytest.raises(RandomSourceError):
            RandomSource([MAX_INT + 1])

    def test_show_random_logs_draws(self, caplog) -> None:
        """Each draw is reported when show_random is set."""
        source = RandomSource([7], show_random=True)
        with caplog.at_level(logging.INFO, logger="demandpaging.randsource"):
            source.next_int()
        assert caplog.records[0].getMessage() == "uses random number 7"


class TestFromFile:
    """Verify loading sequences from disk."""

    def test_whitespace_and_lines(self, tmp_path) -> None:
        """Integers may be split by spaces and newlines."""
        path = tmp_path / "random-numbers.txt"
        path.write_text("1804289383\n846930886 1681692777\n\n1714636915\n")
        source = RandomSource.from_file(str(path))
        assert source.remaining == 4
        assert source.next_int() == 1804289383

    def test_bad_token(self, tmp_path) -> None:
        """Non-integer entries are rejected."""
        path = tmp_path / "random-numbers.txt"
        path.write_text("12\nabc\n")
        with pytest.raises(RandomSourceError, match="not an integer"):
            RandomSource.from_file(str(path))

    def test_missing_file(self, tmp_path) -> None:
        """A missing file is reported as a random source error."""
        with pytest.raises(RandomSourceError):
            RandomSource.from_file(str(tmp_path / "nope.txt"))
