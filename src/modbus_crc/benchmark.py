"""Repeated-calculation timing harness."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from modbus_crc.constants import MAX_ITERATIONS, MIN_ITERATIONS
from modbus_crc.crc import ByteSequence, ChecksumEngine

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    """Checksum of the last run plus wall-clock timings.

    ``total_ns`` covers all iterations; ``single_ns`` is a separate
    one-off calculation timed before the loop.
    """

    checksum: int
    iterations: int
    total_ns: int
    single_ns: int

    @property
    def checksum_hex(self) -> str:
        return f"{self.checksum:04X}"

    @property
    def total_duration(self) -> float:
        return self.total_ns / 1e9

    @property
    def average_duration(self) -> float:
        return self.total_duration / self.iterations

    @property
    def single_duration(self) -> float:
        return self.single_ns / 1e9


def run_benchmark(data: ByteSequence, iterations: int = 1) -> BenchmarkResult:
    """Calculate the CRC of ``data`` ``iterations`` times and time it.

    Every iteration uses a new engine. All runs give the same checksum;
    the loop only exists to make the cost measurable.
    """
    if not MIN_ITERATIONS <= iterations <= MAX_ITERATIONS:
        raise ValueError(
            f"iterations must be between {MIN_ITERATIONS} and {MAX_ITERATIONS}, got {iterations}"
        )
    data = bytes(data)
    _LOGGER.debug("Benchmarking %d bytes x %d iterations", len(data), iterations)

    start = time.perf_counter_ns()
    checksum = ChecksumEngine().calculate(data)
    single_ns = time.perf_counter_ns() - start

    start = time.perf_counter_ns()
    for _ in range(iterations):
        checksum = ChecksumEngine().calculate(data)
    total_ns = time.perf_counter_ns() - start

    result = BenchmarkResult(
        checksum=checksum,
        iterations=iterations,
        total_ns=total_ns,
        single_ns=single_ns,
    )
    _LOGGER.debug(
        "Benchmark done: crc=%s total=%s avg=%s",
        result.checksum_hex,
        format_duration(result.total_duration),
        format_duration(result.average_duration),
    )
    return result


def format_duration(seconds: float) -> str:
    """Format a duration with a unit that keeps the number readable."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"
