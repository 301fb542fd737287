"""Table-driven Modbus CRC-16 with a timing harness."""

from modbus_crc.api import (
    ChecksumRequest,
    ChecksumResponse,
    ErrorResponse,
    calculate,
)
from modbus_crc.benchmark import BenchmarkResult, format_duration, run_benchmark
from modbus_crc.crc import (
    ChecksumEngine,
    append_crc,
    check_crc,
    crc16_modbus,
    crc16_modbus_bytes,
    to_standard,
)
from modbus_crc.errors import (
    ErrorKind,
    HexParseError,
    InputError,
    OddLengthError,
    TooLongError,
)
from modbus_crc.lut import TABLE_HI, TABLE_LO, crc_table
from modbus_crc.parser import format_hex, parse_hex
from modbus_crc.constants import (
    DEFAULT_INPUT,
    MAX_INPUT_BYTES,
    MAX_ITERATIONS,
    MIN_ITERATIONS,
    MODBUS_POLYNOMIAL,
)

__all__ = [
    "ChecksumRequest",
    "ChecksumResponse",
    "ErrorResponse",
    "calculate",
    "BenchmarkResult",
    "format_duration",
    "run_benchmark",
    "ChecksumEngine",
    "append_crc",
    "check_crc",
    "crc16_modbus",
    "crc16_modbus_bytes",
    "to_standard",
    "ErrorKind",
    "HexParseError",
    "InputError",
    "OddLengthError",
    "TooLongError",
    "TABLE_HI",
    "TABLE_LO",
    "crc_table",
    "format_hex",
    "parse_hex",
    "DEFAULT_INPUT",
    "MAX_INPUT_BYTES",
    "MAX_ITERATIONS",
    "MIN_ITERATIONS",
    "MODBUS_POLYNOMIAL",
]
