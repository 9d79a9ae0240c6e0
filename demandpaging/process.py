"""
Simulated process
Issues one memory reference per drive call until its reference budget runs out
"""

from typing import TYPE_CHECKING, Optional

from .references import Reference, advance, initial

if TYPE_CHECKING:
    from .jobmix import JobMix
    from .pager import Pager
    from .randsource import RandomSource


class Process:
    """One workload driving references into the shared pager"""

    def __init__(self, pid: int, size: int, reference_count: int):
        if size <= 0:
            raise ValueError(f"process size must be positive, got {size}")
        if reference_count < 0:
            raise ValueError(f"reference count must be non-negative, got {reference_count}")

        self.pid = pid
        self.size = size
        self.total_reference_count = reference_count
        self.remaining_reference_count = reference_count
        self.prior_address: Optional[int] = None
        self.reference: Reference = initial(pid)

    def drive(self, pager: "Pager", current_time: int):
        """Issue the next reference; does nothing once the budget is spent"""
        if self.remaining_reference_count == 0:
            return

        self.prior_address = advance(self.reference, self.prior_address, self.size,
                                     pager, current_time)
        self.remaining_reference_count -= 1

    def retarget(self, random_source: "RandomSource", jobmix: "JobMix"):
        """Select the reference variant used by the next drive"""
        quotient = random_source.next_probability()
        self.reference = jobmix.select(quotient, self.pid, random_source)

    def should_terminate(self) -> bool:
        return self.remaining_reference_count == 0

    @property
    def issued_reference_count(self) -> int:
        return self.total_reference_count - self.remaining_reference_count

    def __str__(self):
        return (f"Process {self.pid}: size {self.size}, "
                f"total reference count {self.total_reference_count}, "
                f"remaining reference count {self.remaining_reference_count}")
