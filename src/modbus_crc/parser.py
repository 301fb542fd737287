"""Hex text to byte sequence."""

from __future__ import annotations

import logging

from modbus_crc.constants import MAX_INPUT_BYTES
from modbus_crc.errors import HexParseError, OddLengthError, TooLongError

_LOGGER = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def normalize(text: str) -> str:
    """Strip every whitespace character from ``text``."""
    return "".join(text.split())


def parse_hex(text: str) -> bytes:
    """Parse hex text such as ``"01 10 00 11"`` into bytes.

    Whitespace is ignored and digits are case-insensitive.

    Raises:
        OddLengthError: the digit count is odd.
        TooLongError: more than MAX_INPUT_BYTES bytes would be produced.
        HexParseError: a two-character group is not hexadecimal.
    """
    clean = normalize(text)

    if len(clean) % 2 != 0:
        _LOGGER.debug("Rejected input with odd length %d", len(clean))
        raise OddLengthError(len(clean))

    byte_count = len(clean) // 2
    if byte_count > MAX_INPUT_BYTES:
        _LOGGER.debug("Rejected input of %d bytes", byte_count)
        raise TooLongError(byte_count, MAX_INPUT_BYTES)

    result = bytearray(byte_count)
    for i in range(0, len(clean), 2):
        group = clean[i : i + 2]
        # int(group, 16) alone would accept a sign such as "+1"
        if not _HEX_DIGITS.issuperset(group):
            _LOGGER.debug("Rejected group %r at position %d", group, i)
            raise HexParseError(group, i)
        result[i // 2] = int(group, 16)
    return bytes(result)


def format_hex(data: bytes | bytearray) -> str:
    """Render bytes as space-separated uppercase pairs."""
    return " ".join(f"{b:02X}" for b in data)
