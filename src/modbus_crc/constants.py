"""Modbus CRC-16 profile and input limits."""

MODBUS_POLYNOMIAL = 0xA001  # 0x8005 reflected
INITIAL_REGISTER = 0xFF  # both halves of the 0xFFFF seed
MAX_INPUT_BYTES = 256
MIN_ITERATIONS = 1
MAX_ITERATIONS = 1_000_000_000
DEFAULT_INPUT = "01 10 00 11 00 03 06 1A C4 BA D0"
