"""
Round-robin driver
Owns the simulated clock and schedules processes a quantum of references at a time
"""

import logging
from typing import List

from .config import SimulationConfig
from .jobmix import JobMix, get_job_mix
from .pager import Pager
from .process import Process
from .randsource import RandomSource

logger = logging.getLogger(__name__)

QUANTUM = 3


class Driver:
    """Runs every process of a job mix against one pager until all are done"""

    def __init__(self, config: SimulationConfig, random_source: RandomSource):
        config.validate()
        self.config = config
        self.random_source = random_source
        self.jobmix: JobMix = get_job_mix(config.job_mix)
        self.pager = Pager(config.machine_size, config.page_size, config.algorithm,
                           random_source, debug=config.debug)
        self.processes: List[Process] = [
            Process(pid, config.process_size, config.reference_count)
            for pid in range(1, self.jobmix.process_count + 1)
        ]
        self.time = 1

    def run(self) -> Pager:
        """Drive all processes to termination and return the pager"""
        live = list(self.processes)
        while live:
            for process in live:
                self._run_quantum(process)
            live = [p for p in live if not p.should_terminate()]

        logger.debug("simulation finished at time %d after %d random draws",
                     self.time, self.random_source.consumed)
        return self.pager

    def _run_quantum(self, process: Process):
        for _ in range(QUANTUM):
            if process.should_terminate():
                break
            process.drive(self.pager, self.time)
            self.time += 1
            # The variant for the next reference is chosen right after this one
            if not process.should_terminate():
                process.retarget(self.random_source, self.jobmix)
