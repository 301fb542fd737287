"""Tests for the timing harness."""

import pytest

from modbus_crc import (
    MAX_ITERATIONS,
    BenchmarkResult,
    crc16_modbus,
    format_duration,
    run_benchmark,
)

FRAME = bytes([0x01, 0x10, 0x00, 0x11, 0x00, 0x03, 0x06, 0x1A, 0xC4, 0xBA, 0xD0])


def test_checksum_independent_of_iteration_count():
    one = run_benchmark(FRAME, 1)
    many = run_benchmark(FRAME, 1000)
    assert one.checksum == many.checksum == crc16_modbus(FRAME)


def test_average_is_total_over_iterations():
    result = run_benchmark(FRAME, 1000)
    assert result.iterations == 1000
    assert result.average_duration == pytest.approx(result.total_duration / 1000)


def test_durations_are_non_negative():
    result = run_benchmark(FRAME, 10)
    assert result.total_ns >= 0
    assert result.single_ns >= 0
    assert result.total_duration == result.total_ns / 1e9


def test_empty_input():
    result = run_benchmark(b"", 3)
    assert result.checksum == 0xFFFF
    assert result.checksum_hex == "FFFF"


def test_checksum_hex_is_zero_padded_uppercase():
    result = BenchmarkResult(checksum=0x0A4, iterations=1, total_ns=0, single_ns=0)
    assert result.checksum_hex == "00A4"


@pytest.mark.parametrize("iterations", [0, -5, MAX_ITERATIONS + 1])
def test_iterations_out_of_range(iterations):
    with pytest.raises(ValueError, match="iterations"):
        run_benchmark(FRAME, iterations)


def test_result_is_frozen():
    result = run_benchmark(FRAME, 1)
    with pytest.raises(AttributeError):
        result.checksum = 0  # type: ignore[misc]


@pytest.mark.parametrize(
    "seconds,text",
    [
        (5e-7, "500ns"),
        (1.5e-5, "15.000µs"),
        (0.0125, "12.500ms"),
        (2.0, "2.000s"),
    ],
)
def test_format_duration(seconds, text):
    assert format_duration(seconds) == text
