"""Tests for the per-process reference loop."""

from demandpaging.jobmix import JobMix, JobMixPerProcess
from demandpaging.process import Process
from demandpaging.randsource import MAX_INT, RandomSource
from demandpaging.references import ReferenceKind


class RecordingPager:
    """Pager stand-in remembering every reference it receives."""

    def __init__(self):
        self.references = []

    def reference(self, virtual_addr, pid, current_time):
        self.references.append((virtual_addr, pid, current_time))


def sequential_mix():
    return JobMix(1, 1, True, [JobMixPerProcess(1, 0, 0)])


def random_mix():
    return JobMix(3, 1, True, [JobMixPerProcess(0, 0, 0)])


class TestDrive:
    """Verify reference issuing and termination."""

    def test_starts_with_initial_reference(self) -> None:
        """A new process pre-selects the initial variant."""
        process = Process(2, 100, 5)
        assert process.reference.kind is ReferenceKind.INITIAL
        assert process.prior_address is None

        pager = RecordingPager()
        process.drive(pager, 1)
        assert pager.references == [(22, 2, 1)]
        assert process.prior_address == 22
        assert process.remaining_reference_count == 4

    def test_issues_exactly_n_references(self) -> None:
        """After N references further drives do nothing."""
        process = Process(1, 10, 3)
        source = RandomSource([0] * 10)
        pager = RecordingPager()

        for t in range(1, 7):
            process.drive(pager, t)
            if not process.should_terminate():
                process.retarget(source, sequential_mix())

        assert len(pager.references) == 3
        assert process.should_terminate()
        assert process.issued_reference_count == 3
        assert process.prior_address == 3

    def test_zero_references_is_inert(self) -> None:
        """A process with no references never touches the pager."""
        process = Process(1, 10, 0)
        pager = RecordingPager()
        process.drive(pager, 1)
        assert pager.references == []
        assert process.should_terminate()


class TestRetarget:
    """Verify variant selection and random number consumption."""

    def test_sequential_draws_one_value(self) -> None:
        """A non-random selection consumes one probability."""
        process = Process(2, 100, 5)
        source = RandomSource([0, 99])
        pager = RecordingPager()

        process.drive(pager, 1)
        process.retarget(source, sequential_mix())
        assert source.consumed == 1
        assert process.reference.kind is ReferenceKind.SEQUENTIAL

        process.drive(pager, 2)
        assert pager.references[-1] == (23, 2, 2)

    def test_random_draws_two_values(self) -> None:
        """A random selection consumes a probability and a target."""
        process = Process(1, 50, 5)
        source = RandomSource([MAX_INT, 77])
        pager = RecordingPager()

        process.drive(pager, 1)
        process.retarget(source, random_mix())
        assert source.consumed == 2

        process.drive(pager, 2)
        assert pager.references[-1] == (27, 1, 2)

    def test_str(self) -> None:
        """The summary mentions the reference budget."""
        text = str(Process(3, 40, 8))
        assert text.startswith("Process 3:")
        assert "remaining reference count 8" in text
