"""
Run configuration
Machine and process sizes, job mix, replacement algorithm and bundled presets
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError
from .jobmix import get_job_mix


class Algorithm(Enum):
    LRU = "lru"
    FIFO = "fifo"
    RANDOM = "random"


def parse_algorithm(name: str) -> Algorithm:
    """Map a case-insensitive algorithm name to an Algorithm"""
    try:
        return Algorithm(name.strip().lower())
    except ValueError:
        choices = ", ".join(a.value for a in Algorithm)
        raise ConfigError(f"unknown replacement algorithm {name!r}, expected one of {choices}") from None


@dataclass
class SimulationConfig:
    """Parameters of one simulation run"""
    machine_size: int
    page_size: int
    process_size: int
    job_mix: int
    reference_count: int
    algorithm: Algorithm
    debug: bool = False
    show_random: bool = False

    @property
    def frame_count(self) -> int:
        return self.machine_size // self.page_size

    def validate(self) -> "SimulationConfig":
        for name in ("machine_size", "page_size", "process_size", "reference_count"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigError(f"{name.replace('_', ' ')} must be positive, got {value}")
        if self.page_size > self.machine_size:
            raise ConfigError(
                f"page size {self.page_size} exceeds machine size {self.machine_size}"
            )
        if not isinstance(self.algorithm, Algorithm):
            raise ConfigError(f"algorithm must be an Algorithm, got {self.algorithm!r}")

        get_job_mix(self.job_mix)
        return self


# machine size, page size, process size, job mix, reference count, algorithm
PRESETS = (
    (10, 10, 20, 1, 10, "lru"),
    (10, 10, 10, 1, 100, "lru"),
    (10, 10, 10, 2, 10, "lru"),
    (20, 10, 10, 2, 10, "lru"),
    (20, 10, 10, 2, 10, "random"),
    (20, 10, 10, 2, 10, "fifo"),
    (20, 10, 10, 3, 10, "lru"),
    (20, 10, 10, 3, 10, "fifo"),
    (20, 10, 10, 4, 10, "lru"),
    (20, 10, 10, 4, 10, "random"),
    (90, 10, 40, 4, 100, "lru"),
    (40, 10, 90, 1, 100, "lru"),
    (40, 10, 90, 1, 100, "fifo"),
    (800, 40, 400, 4, 5000, "lru"),
    (10, 5, 30, 4, 3, "random"),
    (1000, 40, 400, 4, 5000, "fifo"),
)


def preset(run_id: int, debug: bool = False, show_random: bool = False) -> SimulationConfig:
    """Return bundled run number run_id (1-based)"""
    if not 1 <= run_id <= len(PRESETS):
        raise ConfigError(f"preset must be between 1 and {len(PRESETS)}, got {run_id}")

    machine, page, proc, mix, refs, algo = PRESETS[run_id - 1]
    return SimulationConfig(
        machine_size=machine,
        page_size=page,
        process_size=proc,
        job_mix=mix,
        reference_count=refs,
        algorithm=parse_algorithm(algo),
        debug=debug,
        show_random=show_random,
    )
