#!/usr/bin/env python3
"""
rxcore vs RxPY Performance Comparison

Compares the subscription machinery of rxcore against RxPY on the operations
both libraries share, with memory and GC profiling during the measured run.

Benchmark Categories:
- Subscribe/Complete: subscribing to a finite source and draining it
- Map Chain: values through a chain of map operators
- Materialize: reifying a stream, including a failing one
- Subscription Churn: subscribing and cancelling pending streams
"""

import argparse
import gc
import os
import sys
import time
import tracemalloc
from dataclasses import dataclass
from typing import Callable, List, TypeVar

# Ensure we use the local rxcore package, not an installed one
script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(script_dir, "../.."))
sys.path.insert(0, project_root)

import rx
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rx import operators as ops

from rxcore import Observable, of
from rxcore.operators import map as rx_map
from rxcore.operators import materialize

T = TypeVar("T")

# Configuration
TIME_LIMIT_SECONDS = 1.0
STARTING_N = 10
SCALE_FACTOR = 1.5
NUM_ITERATIONS = 1
CHAIN_DEPTH = 10

LIBRARIES = ("rxcore", "RxPY")


@dataclass
class BenchmarkMetrics:
    """Complete metrics from a benchmark run."""

    library: str
    operation: str
    max_n: int
    operation_time: float
    operations_per_second: float

    # Memory metrics
    memory_peak_kb: int
    memory_allocated_kb: int

    # GC metrics
    gc_total_collections: int


class BenchmarkProfiler:
    """Profile time, memory and GC during benchmark execution."""

    def __enter__(self):
        gc.collect()
        tracemalloc.start()
        self.memory_start, _ = tracemalloc.get_traced_memory()
        self.gc_stats_before = gc.get_count()
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.end_time = time.perf_counter()
        self.gc_stats_after = gc.get_count()
        self.memory_end, self.memory_peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

    def get_metrics(
        self, library: str, operation: str, n: int, operations_performed: int
    ) -> BenchmarkMetrics:
        """Calculate and return all metrics."""
        elapsed = self.end_time - self.start_time
        ops_per_sec = operations_performed / elapsed if elapsed > 0 else 0
        collections = sum(
            max(0, after - before)
            for before, after in zip(self.gc_stats_before, self.gc_stats_after)
        )

        return BenchmarkMetrics(
            library=library,
            operation=operation,
            max_n=n,
            operation_time=elapsed,
            operations_per_second=ops_per_sec,
            memory_peak_kb=self.memory_peak // 1024,
            memory_allocated_kb=(self.memory_end - self.memory_start) // 1024,
            gc_total_collections=collections,
        )


def run_adaptive_benchmark(
    library: str,
    operation: str,
    operation_func: Callable[[int], int],
    time_limit: float = TIME_LIMIT_SECONDS,
) -> BenchmarkMetrics:
    """
    Grow the workload until one run takes ``time_limit``, then profile it.

    ``operation_func(n)`` returns the number of operations it performed.
    """
    n = STARTING_N

    while True:
        start = time.perf_counter()
        operation_func(n)
        if time.perf_counter() - start >= time_limit:
            break
        n = int(n * SCALE_FACTOR) + 1
        if n > 10_000_000:  # Safety limit
            break

    all_metrics = []
    for _ in range(NUM_ITERATIONS):
        with BenchmarkProfiler() as profiler:
            performed = operation_func(n)
        all_metrics.append(profiler.get_metrics(library, operation, n, performed))

    return min(all_metrics, key=lambda m: m.operation_time)


# ============================================================================
# OPERATIONS
# ============================================================================


def rxcore_subscribe_complete(n: int) -> int:
    of(*range(n)).subscribe(lambda v: None)
    return n


def rxpy_subscribe_complete(n: int) -> int:
    rx.from_iterable(range(n)).subscribe(lambda v: None)
    return n


def rxcore_map_chain(n: int) -> int:
    operators = [rx_map(lambda x: x + 1) for _ in range(CHAIN_DEPTH)]
    of(*range(n)).pipe(*operators).subscribe(lambda v: None)
    return n * CHAIN_DEPTH


def rxpy_map_chain(n: int) -> int:
    operators = [ops.map(lambda x: x + 1) for _ in range(CHAIN_DEPTH)]
    rx.from_iterable(range(n)).pipe(*operators).subscribe(lambda v: None)
    return n * CHAIN_DEPTH


def rxcore_materialize(n: int) -> int:
    for _ in range(n):
        of(1, 2, "x").pipe(rx_map(lambda x: x + 1), materialize()).subscribe(
            lambda notification: None
        )
    return n


def rxpy_materialize(n: int) -> int:
    for _ in range(n):
        rx.of(1, 2, "x").pipe(ops.map(lambda x: x + 1), ops.materialize()).subscribe(
            lambda notification: None
        )
    return n


def rxcore_churn(n: int) -> int:
    pending = Observable(lambda subscriber: lambda: None).pipe(materialize())
    for _ in range(n):
        pending.subscribe(lambda v: None).unsubscribe()
    return n


def rxpy_churn(n: int) -> int:
    pending = rx.never().pipe(ops.materialize())
    for _ in range(n):
        pending.subscribe(lambda v: None).dispose()
    return n


BENCHMARKS = [
    ("Subscribe/Complete", rxcore_subscribe_complete, rxpy_subscribe_complete),
    ("Map Chain", rxcore_map_chain, rxpy_map_chain),
    ("Materialize", rxcore_materialize, rxpy_materialize),
    ("Subscription Churn", rxcore_churn, rxpy_churn),
]


class RxcoreRxpyComparison:
    """Compare rxcore and RxPY performance."""

    def __init__(self, quiet: bool = False):
        self.console = Console()
        self.quiet = quiet
        self.results: List[BenchmarkMetrics] = []

    def run_comparison(self):
        """Run all comparison benchmarks."""
        start_time = time.time()

        self._display_header()

        for name, rxcore_operation, rxpy_operation in BENCHMARKS:
            if not self.quiet:
                self.console.print(f"[yellow]Running {name} comparison...[/yellow]")
            ours = run_adaptive_benchmark("rxcore", name, rxcore_operation)
            theirs = run_adaptive_benchmark("RxPY", name, rxpy_operation)
            self.results.extend([ours, theirs])
            if not self.quiet:
                self._display_progress(name, ours, theirs)

        self._display_comparison_results()
        self._display_memory_comparison()

        elapsed = time.time() - start_time
        self.console.print(
            f"\n[dim]Comparison completed in {elapsed:.2f} seconds[/dim]"
        )

    def _display_header(self):
        header = Panel(
            f"rxcore vs RxPY Performance Comparison\n{NUM_ITERATIONS} iterations per benchmark",
            title="Library Comparison",
            border_style="blue",
        )
        self.console.print(header)
        self.console.print()

    def _display_progress(
        self,
        operation_name: str,
        ours: BenchmarkMetrics,
        theirs: BenchmarkMetrics,
    ):
        ours_ops = ours.operations_per_second
        theirs_ops = theirs.operations_per_second

        if ours_ops > theirs_ops:
            winner_text = f"[green]rxcore {ours_ops / theirs_ops:.1f}x faster[/green]"
        else:
            winner_text = f"[blue]RxPY {theirs_ops / ours_ops:.1f}x faster[/blue]"

        self.console.print(
            f"[green]✓[/green] {operation_name}: "
            f"rxcore {ours_ops:,.0f} ops/sec vs RxPY {theirs_ops:,.0f} ops/sec ({winner_text})"
        )

    def _results_by_operation(self):
        operations = {}
        for result in self.results:
            operations.setdefault(result.operation, {})[result.library] = result
        return operations

    def _display_comparison_results(self):
        self.console.print()

        table = Table(title="Performance Comparison")
        table.add_column("Operation", style="cyan")
        table.add_column("rxcore ops/sec", style="green", justify="right")
        table.add_column("RxPY ops/sec", style="blue", justify="right")
        table.add_column("Winner", style="yellow", justify="center")
        table.add_column("Speedup", style="magenta", justify="right")

        for op_name, lib_results in self._results_by_operation().items():
            ours = lib_results["rxcore"].operations_per_second
            theirs = lib_results["RxPY"].operations_per_second
            if ours > theirs:
                winner, speedup = "rxcore", ours / theirs
            else:
                winner, speedup = "RxPY", theirs / ours
            table.add_row(
                op_name, f"{ours:,.0f}", f"{theirs:,.0f}", winner, f"{speedup:.2f}x"
            )

        self.console.print(table)

    def _display_memory_comparison(self):
        self.console.print()

        table = Table(title="Memory Usage Comparison")
        table.add_column("Operation", style="cyan")
        table.add_column("Library", style="white")
        table.add_column("Peak Memory", style="yellow", justify="right")
        table.add_column("Allocated", style="green", justify="right")
        table.add_column("GCs", style="red", justify="right")

        for op_name, lib_results in self._results_by_operation().items():
            for lib_name in LIBRARIES:
                r = lib_results[lib_name]
                table.add_row(
                    op_name if lib_name == LIBRARIES[0] else "",
                    lib_name,
                    f"{r.memory_peak_kb:,} KB",
                    f"{r.memory_allocated_kb:,} KB",
                    str(r.gc_total_collections),
                )

        self.console.print(table)


def print_config():
    """Print the current benchmark configuration."""
    print("rxcore vs RxPY Comparison Configuration:")
    print(f"  TIME_LIMIT_SECONDS: {TIME_LIMIT_SECONDS}")
    print(f"  STARTING_N: {STARTING_N}")
    print(f"  SCALE_FACTOR: {SCALE_FACTOR}")
    print(f"  NUM_ITERATIONS: {NUM_ITERATIONS}")
    print(f"  CHAIN_DEPTH: {CHAIN_DEPTH}")
    print("\nBenchmark Categories:")
    for name, _, _ in BENCHMARKS:
        print(f"  - {name}")


def main():
    """Main entry point for the comparison script."""
    parser = argparse.ArgumentParser(description="rxcore vs RxPY Performance Comparison")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output, show only final results",
    )

    args = parser.parse_args()

    if args.config:
        print_config()
        return

    if not args.quiet:
        print_config()
        print()

    RxcoreRxpyComparison(quiet=args.quiet).run_comparison()


if __name__ == "__main__":
    main()
