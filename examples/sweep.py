"""Benchmark the default frame over a logarithmic range of iteration counts."""

import logging

from modbus_crc import DEFAULT_INPUT, format_duration, parse_hex, run_benchmark

STEPS = [1, 10, 100, 1_000, 10_000, 100_000, 1_000_000]


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    data = parse_hex(DEFAULT_INPUT)

    print(f"{'iterations':>12}  {'crc':>4}  {'total':>12}  {'average':>12}")
    for iterations in STEPS:
        result = run_benchmark(data, iterations)
        print(
            f"{iterations:>12}  {result.checksum_hex}  "
            f"{format_duration(result.total_duration):>12}  "
            f"{format_duration(result.average_duration):>12}"
        )


if __name__ == "__main__":
    main()
