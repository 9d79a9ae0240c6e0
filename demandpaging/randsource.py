"""
Deterministic random number source
Replays a pre-recorded sequence of integers so runs are reproducible
"""

import logging
from typing import Iterable, List

from .errors import RandomSequenceExhausted, RandomSourceError

logger = logging.getLogger(__name__)

MAX_INT = 2**31 - 1


class RandomSource:
    """Replayable stream of non-negative integers bounded by MAX_INT"""

    def __init__(self, values: Iterable[int], show_random: bool = False):
        self.values: List[int] = list(values)
        self.show_random = show_random
        self.cursor = 0

        for value in self.values:
            if value < 0 or value > MAX_INT:
                raise RandomSourceError(f"random value {value} outside [0, {MAX_INT}]")

    @classmethod
    def from_file(cls, path: str, show_random: bool = False) -> "RandomSource":
        """Load whitespace separated integers from a file"""
        try:
            with open(path, "r") as f:
                tokens = f.read().split()
        except OSError as e:
            raise RandomSourceError(f"could not open random number file {path}: {e}") from e

        values = []
        for position, token in enumerate(tokens, start=1):
            try:
                values.append(int(token))
            except ValueError:
                raise RandomSourceError(
                    f"entry {position} of {path} is not an integer: {token!r}"
                ) from None

        return cls(values, show_random=show_random)

    @property
    def consumed(self) -> int:
        return self.cursor

    @property
    def remaining(self) -> int:
        return len(self.values) - self.cursor

    def next_int(self) -> int:
        """Return the next integer, advancing the cursor once"""
        if self.cursor >= len(self.values):
            raise RandomSequenceExhausted(
                f"random number sequence exhausted after {self.cursor} values"
            )

        value = self.values[self.cursor]
        self.cursor += 1

        if self.show_random:
            logger.info("uses random number %d", value)

        return value

    def next_probability(self) -> float:
        """Return a probability in [0, 1) derived from the next integer"""
        return self.next_int() / (MAX_INT + 1.0)
