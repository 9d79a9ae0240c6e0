"""
Pager
Frame table with LRU, FIFO and Random page replacement and per-process statistics
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .config import Algorithm
from .errors import ConfigError, FrameTableEmptyError
from .randsource import RandomSource

logger = logging.getLogger(__name__)


class Frame:
    """Represents a physical memory frame"""

    def __init__(self, page_id: Optional[int] = None, owner_pid: Optional[int] = None,
                 access_time: Optional[int] = None):
        if (page_id is None) != (owner_pid is None) or (page_id is None) != (access_time is None):
            raise ValueError("a frame is either fully populated or fully uninitialized")

        self.page_id = page_id
        self.owner_pid = owner_pid
        self.last_access_time = access_time
        # Load time never moves on hits; FIFO orders by it
        self.load_time = access_time

    @property
    def is_initialized(self) -> bool:
        return self.owner_pid is not None

    def holds(self, page_id: int, pid: int) -> bool:
        return self.page_id == page_id and self.owner_pid == pid

    def residency_time(self, eviction_time: int) -> int:
        return eviction_time - self.last_access_time

    def __repr__(self):
        if not self.is_initialized:
            return "Frame(uninitialized)"
        return (f"Frame(page={self.page_id}, pid={self.owner_pid}, "
                f"last_access={self.last_access_time}, loaded={self.load_time})")


@dataclass
class ProcessStats:
    """Fault, eviction and residency totals of one process"""
    page_fault_count: int = 0
    eviction_count: int = 0
    sum_residency_time: int = 0

    @property
    def average_residency(self) -> Optional[float]:
        """Undefined (None) until a page of the process has been evicted"""
        if self.eviction_count == 0:
            return None
        return self.sum_residency_time / self.eviction_count


@dataclass(frozen=True)
class ReferenceOutcome:
    """What happened to one reference"""
    hit: bool
    frame_index: int
    evicted: Optional[Frame] = None

    @property
    def fault(self) -> bool:
        return not self.hit


class Pager:
    """Fixed-size frame table shared by all processes"""

    def __init__(self, machine_size: int, page_size: int, algorithm: Algorithm,
                 random_source: RandomSource, debug: bool = False):
        if page_size <= 0:
            raise ConfigError(f"page size must be positive, got {page_size}")
        if machine_size // page_size < 1:
            raise ConfigError(
                f"machine size {machine_size} holds no frame of page size {page_size}"
            )

        self.machine_size = machine_size
        self.page_size = page_size
        self.frame_count = machine_size // page_size
        self.algorithm = algorithm
        self.random_source = random_source
        self.debug = debug

        # Physical memory (frames)
        self.frame_table: List[Frame] = [Frame() for _ in range(self.frame_count)]
        # Free frames are handed out from the highest index down
        self.next_insertion_idx = self.frame_count - 1

        # Statistics
        self.process_stats_map: Dict[int, ProcessStats] = {}

    def reference(self, virtual_addr: int, pid: int, current_time: int) -> ReferenceOutcome:
        """Resolve a reference of process pid, faulting the page in if needed"""
        page_id = virtual_addr // self.page_size
        trace = [f"Process {pid} references word {virtual_addr} "
                 f"(page {page_id}) at time {current_time}:"]

        frame_index = self._search_frame(page_id, pid)
        if frame_index is not None:
            self.frame_table[frame_index].last_access_time = current_time
            trace.append(f"Hit in frame {frame_index}")
            outcome = ReferenceOutcome(hit=True, frame_index=frame_index)
        else:
            trace.append("Fault,")
            new_frame = Frame(page_id, pid, current_time)
            if self._can_insert():
                frame_index = self._insert_free(new_frame)
                trace.append(f"using free frame {frame_index}")
                outcome = ReferenceOutcome(hit=False, frame_index=frame_index)
            else:
                frame_index, evicted = self._swap_frame(new_frame, current_time)
                trace.append(f"evicting page {evicted.page_id} of process "
                             f"{evicted.owner_pid} from frame {frame_index}")
                outcome = ReferenceOutcome(hit=False, frame_index=frame_index, evicted=evicted)

        if self.debug:
            logger.info(" ".join(trace))

        return outcome

    def _search_frame(self, page_id: int, pid: int) -> Optional[int]:
        """Linear scan for the frame holding (page_id, pid)"""
        for i, frame in enumerate(self.frame_table):
            if frame.holds(page_id, pid):
                return i
        return None

    def _can_insert(self) -> bool:
        return self.next_insertion_idx >= 0

    def _insert_free(self, frame: Frame) -> int:
        frame_index = self.next_insertion_idx
        self.frame_table[frame_index] = frame
        self.next_insertion_idx -= 1
        self._stats_for(frame.owner_pid).page_fault_count += 1
        return frame_index

    def _swap_frame(self, new_frame: Frame, current_time: int) -> Tuple[int, Frame]:
        """Evict a victim chosen by the configured algorithm and load new_frame"""
        if self.algorithm is Algorithm.LRU:
            frame_index = self._search_least_recently_used_frame()
        elif self.algorithm is Algorithm.FIFO:
            frame_index = self._search_oldest_frame()
        else:
            frame_index = self.random_source.next_int() % self.frame_count

        if frame_index is None:
            raise FrameTableEmptyError(
                f"{self.algorithm.value} eviction requested on an empty frame table"
            )

        old_frame = self.frame_table[frame_index]
        self._record_eviction(old_frame, new_frame, current_time)
        self.frame_table[frame_index] = new_frame
        return frame_index, old_frame

    def _search_least_recently_used_frame(self) -> Optional[int]:
        return self._search_min_frame(lambda frame: frame.last_access_time)

    def _search_oldest_frame(self) -> Optional[int]:
        return self._search_min_frame(lambda frame: frame.load_time)

    def _search_min_frame(self, key) -> Optional[int]:
        """Lowest-keyed frame; strict comparison keeps the lowest index on ties"""
        if not self.frame_table[self.frame_count - 1].is_initialized:
            logger.warning("encounter empty frame table when searching victim frame")
            return None

        candidate_index = 0
        oldest_time = float('inf')
        for i, frame in enumerate(self.frame_table):
            if frame.is_initialized and key(frame) < oldest_time:
                oldest_time = key(frame)
                candidate_index = i

        return candidate_index

    def _record_eviction(self, leaving: Frame, incoming: Frame, eviction_time: int):
        outgoing = self._stats_for(leaving.owner_pid)
        outgoing.eviction_count += 1
        outgoing.sum_residency_time += leaving.residency_time(eviction_time)

        self._stats_for(incoming.owner_pid).page_fault_count += 1

    def _stats_for(self, pid: int) -> ProcessStats:
        if pid not in self.process_stats_map:
            self.process_stats_map[pid] = ProcessStats()
        return self.process_stats_map[pid]

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self.frame_table)

    @property
    def free_frames(self) -> int:
        return self.next_insertion_idx + 1

    @property
    def process_stats(self) -> Mapping[int, ProcessStats]:
        return MappingProxyType(self.process_stats_map)

    @property
    def total_faults(self) -> int:
        return sum(s.page_fault_count for s in self.process_stats_map.values())

    @property
    def total_evictions(self) -> int:
        return sum(s.eviction_count for s in self.process_stats_map.values())

    @property
    def total_residency(self) -> int:
        return sum(s.sum_residency_time for s in self.process_stats_map.values())

    def average_residency(self) -> Optional[float]:
        """Overall average residency, None when nothing was evicted"""
        evictions = self.total_evictions
        if evictions == 0:
            return None
        return self.total_residency / evictions

    def get_stats(self) -> Dict:
        """Return aggregate statistics"""
        return {
            'frame_count': self.frame_count,
            'page_faults': self.total_faults,
            'evictions': self.total_evictions,
            'residency_sum': self.total_residency,
            'average_residency': self.average_residency(),
        }
