"""
Reporting
Text summary of per-process statistics and an optional bar chart
"""

from typing import List, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .config import SimulationConfig
from .pager import Pager


def format_header(config: SimulationConfig) -> List[str]:
    return [
        f"The machine size is {config.machine_size}.",
        f"The page size is {config.page_size}.",
        f"The process size is {config.process_size}.",
        f"The job mix number is {config.job_mix}.",
        f"The number of references per process is {config.reference_count}.",
        f"The replacement algorithm is {config.algorithm.value}.",
        f"The level of debugging output is {int(config.debug)}",
    ]


def format_report(pager: Pager) -> List[str]:
    """Per-process lines followed by the overall totals"""
    lines = []
    for pid in sorted(pager.process_stats):
        stats = pager.process_stats[pid]
        average = stats.average_residency
        if average is None:
            lines.append(f"Process {pid} had {stats.page_fault_count} faults.")
            lines.append("\tWith no evictions, the average residence is undefined.")
        else:
            lines.append(f"Process {pid} had {stats.page_fault_count} faults "
                         f"and {average:g} average residency.")

    overall = pager.average_residency()
    lines.append("")
    if overall is None:
        lines.append(f"The total number of faults is {pager.total_faults}.")
        lines.append("\tWith no evictions, the overall average residence is undefined.")
    else:
        lines.append(f"The total number of faults is {pager.total_faults} "
                     f"and the overall average residency is {overall:g}.")
    return lines


def stats_arrays(pager: Pager) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """pids, faults, evictions and average residency (NaN when undefined)"""
    pids = np.array(sorted(pager.process_stats), dtype=int)
    faults = np.array([pager.process_stats[p].page_fault_count for p in pids], dtype=int)
    evictions = np.array([pager.process_stats[p].eviction_count for p in pids], dtype=int)
    residency = np.array([pager.process_stats[p].sum_residency_time for p in pids], dtype=float)

    average = np.full(len(pids), np.nan)
    np.divide(residency, evictions, out=average, where=evictions > 0)
    return pids, faults, evictions, average


def plot_stats(pager: Pager, path: str, title: str = "Demand paging") -> None:
    """Save a bar chart of faults and average residency per process"""
    pids, faults, _, average = stats_arrays(pager)
    x = np.arange(len(pids))

    fig, (ax_faults, ax_residency) = plt.subplots(1, 2, figsize=(10, 4))
    ax_faults.bar(x, faults, color='steelblue')
    ax_faults.set_title('Page faults')
    ax_faults.set_xticks(x)
    ax_faults.set_xticklabels([f"P{p}" for p in pids])

    # Undefined residencies are drawn as empty bars
    ax_residency.bar(x, np.nan_to_num(average), color='orange')
    ax_residency.set_title('Average residency')
    ax_residency.set_xticks(x)
    ax_residency.set_xticklabels([f"P{p}" for p in pids])

    fig.suptitle(f"{title} ({pager.algorithm.value}, {pager.frame_count} frames)")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
