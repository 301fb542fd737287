"""Basic example: checksum and timings for the default Modbus frame.

Pass hex text and an iteration count on the command line to override them:

    python examples/basic.py "01 03 00 00 00 01" 100000
"""

import logging
import sys

from modbus_crc import (
    DEFAULT_INPUT,
    ChecksumRequest,
    ErrorResponse,
    calculate,
    format_duration,
)


def main() -> int:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    text = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_INPUT
    iterations = int(sys.argv[2]) if len(sys.argv) > 2 else 1
    request = ChecksumRequest(text=text, iterations=iterations)

    print("=" * 60)
    print("  Modbus CRC-16")
    print("=" * 60)
    print(f"  Bytes:          {request.text}")
    print(f"  Iterations:     {request.iterations}")

    response = calculate(request)
    if isinstance(response, ErrorResponse):
        print(f"  Error ({response.error_kind.value}): {response.message}")
        return 1

    print(f"  Result:         {response.checksum_hex}")
    print(f"  Execution time: {format_duration(response.total_duration)}")
    print(f"  Iteration time: {format_duration(response.single_duration)}")
    print(f"  Average:        {format_duration(response.average_duration)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
