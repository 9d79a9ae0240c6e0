"""
Reference variants
Each variant turns the prior referenced address of a process into the next one
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .pager import Pager

INIT_FACTOR = 111
SEQUENTIAL_DELTA = 1
BACKWARD_DELTA = 5


class ReferenceKind(Enum):
    INITIAL = "initial"
    SEQUENTIAL = "sequential"
    BACKWARD = "backward"
    JUMP = "jump"
    RANDOM = "random"


@dataclass(frozen=True)
class Reference:
    """Reference variant selected for the next access of one process"""
    kind: ReferenceKind
    pid: int
    random_value: Optional[int] = None

    def __post_init__(self):
        if self.kind is ReferenceKind.RANDOM and self.random_value is None:
            raise ValueError("random reference needs a random value")


def initial(pid: int) -> Reference:
    return Reference(ReferenceKind.INITIAL, pid)


def next_address(reference: Reference, prior_address: Optional[int], size: int) -> int:
    """Compute the address referenced after prior_address, wrapped into [0, size)"""
    kind = reference.kind

    if kind is ReferenceKind.INITIAL:
        return (INIT_FACTOR * reference.pid) % size
    if prior_address is None:
        raise ValueError(f"{kind.value} reference needs a prior address")

    if kind is ReferenceKind.SEQUENTIAL:
        return (prior_address + SEQUENTIAL_DELTA) % size
    elif kind is ReferenceKind.BACKWARD:
        # Python modulo keeps the result non-negative
        return (prior_address - BACKWARD_DELTA) % size
    elif kind is ReferenceKind.JUMP:
        return (prior_address + size // 2) % size
    else:
        return reference.random_value % size


def advance(reference: Reference, prior_address: Optional[int], size: int,
            pager: "Pager", current_time: int) -> int:
    """Reference the next address through the pager and return it"""
    address = next_address(reference, prior_address, size)
    pager.reference(address, reference.pid, current_time)
    return address
