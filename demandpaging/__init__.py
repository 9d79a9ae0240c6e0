"""
Demand Paging Simulator
Simulates frames, processes with probabilistic reference patterns, and
LRU / FIFO / Random page replacement
"""

from .config import Algorithm, SimulationConfig, parse_algorithm, preset
from .driver import Driver
from .errors import (
    ConfigError,
    DemandPagingError,
    FrameTableEmptyError,
    RandomSequenceExhausted,
    RandomSourceError,
)
from .jobmix import JobMix, JobMixPerProcess, get_job_mix
from .pager import Frame, Pager, ProcessStats
from .process import Process
from .randsource import RandomSource
from .references import Reference, ReferenceKind

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "ConfigError",
    "DemandPagingError",
    "Driver",
    "Frame",
    "FrameTableEmptyError",
    "JobMix",
    "JobMixPerProcess",
    "Pager",
    "Process",
    "ProcessStats",
    "RandomSequenceExhausted",
    "RandomSource",
    "RandomSourceError",
    "Reference",
    "ReferenceKind",
    "SimulationConfig",
    "get_job_mix",
    "parse_algorithm",
    "preset",
]
