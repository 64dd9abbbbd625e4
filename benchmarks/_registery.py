"""Registry of outcome benchmarks and the loop that times them."""

import timeit
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Final, NamedTuple

from rich.console import Console
from rich.progress import Progress

import resultish as rs

type Outcomes = list[rs.Outcome[int, str]]

SIZES: Final = (256, 1024, 4096)
REPEATS: Final = 15
"""Timed samples per size; the pipeline keeps their median."""

CONSOLE: Final = Console()


@dataclass(slots=True)
class Benchmark:
    """One registered operation, with its workload pre-built for every size."""

    category: str
    name: str
    workloads: dict[int, Callable[[], object]] = field(default_factory=dict)


class Row(NamedTuple):
    """Per-call time of one sample."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: list[Benchmark] = []


def mixed_outcomes(size: int) -> Outcomes:
    """Build `size` outcomes cycling through the three variants."""

    def _make(i: int) -> rs.Outcome[int, str]:
        match i % 3:
            case 0:
                return rs.Success(i)
            case 1:
                return rs.Partial(i, f"warning {i}")
            case _:
                return rs.Failure(f"error {i}")

    return [_make(i) for i in range(size)]


def bench[P](
    *, gen: Callable[[int], P] = mixed_outcomes
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Register the decorated function, called once per size on `gen(size)`."""

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        category = func.__qualname__.split(".")[0]
        BENCHMARKS.append(
            Benchmark(
                category,
                func.__name__,
                {size: partial(func, gen(size)) for size in SIZES},
            )
        )
        return func

    return decorator


def _sample(b: Benchmark, size: int) -> list[Row]:
    timer = timeit.Timer(b.workloads[size])
    calls, _ = timer.autorange()
    return [
        Row(b.category, b.name, size, run_idx, total / calls)
        for run_idx, total in enumerate(timer.repeat(repeat=REPEATS, number=calls))
    ]


def collect_raw_timings(benchmarks: list[Benchmark]) -> list[Row]:
    """Time every registered workload; statistics are computed downstream."""
    jobs = [(b, size) for b in benchmarks for size in b.workloads]
    CONSOLE.print(f"Timing {len(jobs)} workloads", style="bold white")
    rows: list[Row] = []
    with Progress(console=CONSOLE) as progress:
        task = progress.add_task("[cyan]Benchmarking...", total=len(jobs))
        for b, size in jobs:
            desc = f"[cyan]{b.category}.{b.name} @ {size}"
            progress.update(task, description=desc)
            rows.extend(_sample(b, size))
            progress.advance(task)
    return rows
