"""
tagparse CLI Bench Command
==========================

Measure parse throughput for tags with a growing number of attributes.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Sequence

from tagparse.engine.models import MappingFactory, get_mapping_strategy
from tagparse.engine.parser import parse_tag
from tagparse.utils.logger import get_logger


@dataclass
class BenchResult:
    """Timing of ``iterations`` parses of a tag with ``size`` attributes."""
    size: int
    iterations: int
    seconds: float

    @property
    def parses_per_second(self) -> float:
        if self.seconds <= 0:
            return float("inf")
        return self.iterations / self.seconds

    @property
    def attributes_per_second(self) -> float:
        return self.parses_per_second * self.size


def generate_sample_input(num_attributes: int) -> str:
    """Build ``<div width="40", width="40", ...>``."""
    attributes = ", ".join('width="40"' for _ in range(num_attributes))
    return f"<div {attributes}>"


def run_benchmark(
    sizes: Sequence[int],
    iterations: int,
    mapping_factory: MappingFactory = dict,
    clock: Callable[[], float] = time.perf_counter,
) -> List[BenchResult]:
    """
    Time parsing of generated tags.

    Input generation happens outside the timed region.

    Raises:
        ValueError: If iterations is not positive
    """
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")

    logger = get_logger().with_context(command="bench")
    results = []

    for size in sizes:
        source = generate_sample_input(size)

        start = clock()
        for _ in range(iterations):
            parse_tag(source, mapping_factory)
        elapsed = clock() - start

        result = BenchResult(size=size, iterations=iterations, seconds=elapsed)
        logger.debug("Benchmarked size", size=size, seconds=f"{elapsed:.6f}")
        results.append(result)

    return results


def run_bench(sizes: Sequence[int], iterations: int, mapping: str = "dict") -> int:
    """
    Run the benchmark and print a results table.

    Returns:
        Exit code
    """
    mapping_factory = get_mapping_strategy(mapping)
    results = run_benchmark(sizes, iterations, mapping_factory)

    print(f"Parse HTML div ({iterations} iterations, {mapping} mapping)")
    print()
    print(f"  {'attrs':>6}  {'total (s)':>10}  {'parses/s':>12}  {'attrs/s':>14}")
    for result in results:
        print(
            f"  {result.size:>6}  {result.seconds:>10.4f}  "
            f"{result.parses_per_second:>12,.0f}  "
            f"{result.attributes_per_second:>14,.0f}"
        )

    get_logger().info("Benchmark finished", sizes=len(results))
    return 0
