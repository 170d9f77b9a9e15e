import random
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
from tabulate import tabulate

from search_timer.data_loader import generate_num_array, sorted_copy
from search_timer.simulator import SearchKind, sim_search

REPORT_HEADERS = ["Search Type", "# Searches", "Array Size", "Avg. Iterations", "Average Time (ms)"]
COLUMN_WIDTHS = [12, 12, 12, 20, 20]
SEPARATOR_WIDTH = 79


@dataclass(frozen=True)
class BenchmarkResult:
    search_type: str
    num_searches: int
    array_size: int
    avg_iterations: float
    avg_time_ms: float


def run_benchmarks(array_size: int, rng: Optional[random.Random] = None, timer=time.perf_counter,
                   show_progress: bool = False) -> list[BenchmarkResult]:
    """
    Runs `array_size` random searches per algorithm over one generated array
    and averages the comparison counts and the time per search.

    Linear search scans the array as generated; binary search runs on a sorted
    copy of the same values. The whole loop of searches is timed, not each call.
    """
    rng = rng or random.Random()
    num_range = array_size

    if show_progress:
        print(f"1. Generating {array_size} distinct values from [1, {num_range}]...")
    search_array = generate_num_array(array_size, num_range, rng=rng)
    arrays = {
        SearchKind.LINEAR: search_array,
        SearchKind.BINARY: sorted_copy(search_array),
    }

    results = []
    for step, (kind, data) in enumerate(arrays.items(), start=2):
        if show_progress:
            print(f"{step}. Running {array_size} {kind.value.lower()} searches...")

        counts = []
        start_time = timer()
        for _ in range(array_size):
            counts.append(sim_search(kind, num_range, data, rng=rng))
        end_time = timer()

        total_ms = (end_time - start_time) * 1e3
        avg_iterations = float(np.mean(counts)) if counts else 0.0
        avg_time_ms = total_ms / array_size if array_size else 0.0
        results.append(BenchmarkResult(kind.value, array_size, array_size, avg_iterations, avg_time_ms))

    return results


def _format_cells(result: BenchmarkResult) -> list[str]:
    return [
        result.search_type,
        str(result.num_searches),
        str(result.array_size),
        f"{result.avg_iterations:.2f}",
        f"{result.avg_time_ms:.6f}",
    ]


def _fixed_width_row(cells: list[str]) -> str:
    return " ".join(f"{cell:<{width}}" for cell, width in zip(cells, COLUMN_WIDTHS))


def format_report(results: list[BenchmarkResult], tablefmt: Optional[str] = None) -> str:
    """
    Renders the results as a text table.

    With no `tablefmt` the table uses fixed left-justified columns and a dashed
    separator line. Any other value is handed to tabulate (e.g. "grid").
    """
    rows = [_format_cells(result) for result in results]

    if tablefmt is not None:
        return tabulate(rows, headers=REPORT_HEADERS, tablefmt=tablefmt, disable_numparse=True)

    lines = [_fixed_width_row(REPORT_HEADERS), "-" * SEPARATOR_WIDTH]
    lines.extend(_fixed_width_row(cells) for cells in rows)
    return "\n".join(lines)
