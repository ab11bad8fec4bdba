"""Random-workload timing harness for grid backends."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from gridpack.core.backends import GridBackend, create_grid
from gridpack.core.errors import GridError
from gridpack.core.grid import Grid
from gridpack.core.models import Item, Loc

ACTIONS: tuple[str, ...] = ("add", "remove", "transpose", "move")


@dataclass(frozen=True, slots=True)
class ActionStats:
    """Timing summary for one action kind, in nanoseconds."""

    count: int
    succeeded: int
    mean_ns: float
    p50_ns: float
    p95_ns: float


@dataclass(slots=True)
class BenchmarkReport:
    backend: GridBackend
    rows: int
    cols: int
    iterations: int
    actions: dict[str, ActionStats] = field(default_factory=dict)
    final_items: int = 0


@dataclass(slots=True)
class _Samples:
    durations: list[int] = field(default_factory=list)
    succeeded: int = 0

    def summarize(self) -> ActionStats:
        if not self.durations:
            return ActionStats(count=0, succeeded=0, mean_ns=0.0, p50_ns=0.0, p95_ns=0.0)
        values = np.asarray(self.durations, dtype=np.float64)
        p50, p95 = np.percentile(values, [50, 95])
        return ActionStats(
            count=len(self.durations),
            succeeded=self.succeeded,
            mean_ns=float(values.mean()),
            p50_ns=float(p50),
            p95_ns=float(p95),
        )


def run_benchmark(
    rows: int,
    cols: int,
    iterations: int,
    *,
    backend: GridBackend | str = GridBackend.DENSE,
    seed: int | None = None,
) -> BenchmarkReport:
    """Run a 70/10/10/10 add/remove/transpose/move workload on a fresh grid.

    Items span up to half the grid in each direction. Remove, transpose and
    move target anchors of items placed earlier in the run and are skipped
    while the grid is empty.
    """
    rng = random.Random(seed)
    grid = create_grid(rows, cols, backend)
    samples = {action: _Samples() for action in ACTIONS}
    anchors: list[Loc] = []

    for _ in range(iterations):
        roll = rng.randint(1, 100)
        if roll <= 70:
            item = Item(
                rows=rng.randrange(max(1, grid.rows // 2)),
                cols=rng.randrange(max(1, grid.cols // 2)),
                symbol=chr(rng.randrange(33, 127)),
            )
            loc = _random_loc(rng, grid)
            if _timed(samples["add"], lambda: grid.add(item, loc)):
                anchors.append(loc)
            continue

        if not anchors:
            continue
        idx = rng.randrange(len(anchors))
        anchor = anchors[idx]
        if roll <= 80:
            _timed(samples["remove"], lambda: grid.remove(anchor))
            anchors[idx] = anchors[-1]
            anchors.pop()
        elif roll <= 90:
            _timed(samples["transpose"], lambda: grid.transpose(anchor))
        else:
            dst = _random_loc(rng, grid)
            if _timed(samples["move"], lambda: grid.move(anchor, dst)):
                anchors[idx] = dst

    return BenchmarkReport(
        backend=GridBackend(str(backend).strip().lower()),
        rows=grid.rows,
        cols=grid.cols,
        iterations=iterations,
        actions={action: sample.summarize() for action, sample in samples.items()},
        final_items=len(grid),
    )


def format_report(report: BenchmarkReport) -> str:
    lines = [
        f"Benchmark results ({report.backend.value}, {report.rows}x{report.cols}, {report.iterations} iterations)",
        f"{'action':<10} {'count':>8} {'ok':>8} {'mean_ns':>12} {'p50_ns':>12} {'p95_ns':>12}",
    ]
    for action, stats in report.actions.items():
        lines.append(
            f"{action:<10} {stats.count:>8} {stats.succeeded:>8} "
            f"{stats.mean_ns:>12.1f} {stats.p50_ns:>12.1f} {stats.p95_ns:>12.1f}"
        )
    lines.append(f"items left in grid: {report.final_items}")
    return "\n".join(lines)


def _timed(samples: _Samples, call: Callable[[], object]) -> bool:
    start = time.perf_counter_ns()
    try:
        call()
    except GridError:
        ok = False
    else:
        ok = True
    samples.durations.append(time.perf_counter_ns() - start)
    if ok:
        samples.succeeded += 1
    return ok


def _random_loc(rng: random.Random, grid: Grid) -> Loc:
    return Loc(rng.randrange(grid.rows), rng.randrange(grid.cols))
