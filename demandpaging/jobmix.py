"""
Job mixes
Probability distributions deciding which reference variant a process uses next
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .errors import ConfigError
from .randsource import RandomSource
from .references import Reference, ReferenceKind

# Tolerance for float sums such as 0.75 + 0.125 + 0.125
EPSILON = 1e-9


@dataclass
class JobMixPerProcess:
    """Reference distribution of one process: A sequential, B backward, C jump"""
    a: float
    b: float
    c: float
    seq_threshold: float = field(init=False)
    back_threshold: float = field(init=False)
    jump_threshold: float = field(init=False)

    def __post_init__(self):
        if min(self.a, self.b, self.c) < 0:
            raise ConfigError(f"job mix probabilities must be non-negative: {self}")
        if self.a + self.b + self.c > 1 + EPSILON:
            raise ConfigError(f"job mix probabilities sum above 1: {self}")

        self.seq_threshold = self.a
        self.back_threshold = self.seq_threshold + self.b
        self.jump_threshold = self.back_threshold + self.c

    @property
    def d(self) -> float:
        """Probability of a uniformly random reference"""
        return max(0.0, 1 - self.a - self.b - self.c)

    def __repr__(self):
        return f"JobMixPerProcess(A={self.a}, B={self.b}, C={self.c}, D={self.d:g})"


class JobMix:
    """Selects the next reference variant for each process"""

    def __init__(self, mix_id: int, process_count: int, uniform: bool,
                 mixes: Sequence[JobMixPerProcess]):
        if process_count < 1:
            raise ConfigError(f"job mix {mix_id} needs at least one process")
        if uniform and len(mixes) != 1:
            raise ConfigError(f"uniform job mix {mix_id} takes exactly one distribution")
        if not uniform and len(mixes) != process_count:
            raise ConfigError(
                f"job mix {mix_id} has {len(mixes)} distributions for {process_count} processes"
            )

        self.mix_id = mix_id
        self.process_count = process_count
        self.uniform = uniform
        self.mixes: List[JobMixPerProcess] = list(mixes)

    def mix_for(self, pid: int) -> JobMixPerProcess:
        return self.mixes[0] if self.uniform else self.mixes[pid - 1]

    def select(self, quotient: float, pid: int, random_source: RandomSource) -> Reference:
        """
        Classify a probability draw into the next reference variant.
        Boundary draws go to the earlier variant. A random reference draws
        its target integer from random_source here.
        """
        mix = self.mix_for(pid)

        if quotient <= mix.seq_threshold:
            return Reference(ReferenceKind.SEQUENTIAL, pid)
        elif quotient <= mix.back_threshold:
            return Reference(ReferenceKind.BACKWARD, pid)
        elif quotient <= mix.jump_threshold:
            return Reference(ReferenceKind.JUMP, pid)
        else:
            return Reference(ReferenceKind.RANDOM, pid, random_source.next_int())

    def describe(self) -> str:
        lines = [f"JobMix {self.mix_id}:"]
        for i, mix in enumerate(self.mixes, start=1):
            owner = "all processes" if self.uniform else f"process {i}"
            lines.append(
                f"  {owner}: A={mix.a:g} (threshold {mix.seq_threshold:g}), "
                f"B={mix.b:g} (threshold {mix.back_threshold:g}), "
                f"C={mix.c:g} (threshold {mix.jump_threshold:g}), D={mix.d:g}"
            )
        return "\n".join(lines)


JOB_MIXES: Dict[int, JobMix] = {
    # One process with fully sequential references
    1: JobMix(1, 1, True, [JobMixPerProcess(1, 0, 0)]),
    # Four processes, each fully sequential
    2: JobMix(2, 4, True, [JobMixPerProcess(1, 0, 0)]),
    # Four processes, each fully random
    3: JobMix(3, 4, True, [JobMixPerProcess(0, 0, 0)]),
    # Four processes, each with its own mix
    4: JobMix(4, 4, False, [
        JobMixPerProcess(0.75, 0.25, 0),
        JobMixPerProcess(0.75, 0, 0.25),
        JobMixPerProcess(0.75, 0.125, 0.125),
        JobMixPerProcess(0.5, 0.125, 0.125),
    ]),
}


def get_job_mix(mix_id: int) -> JobMix:
    try:
        return JOB_MIXES[mix_id]
    except KeyError:
        raise ConfigError(
            f"unknown job mix {mix_id}, expected one of {sorted(JOB_MIXES)}"
        ) from None
