"""Lookup tables for the table-driven Modbus CRC-16.

TABLE_HI and TABLE_LO are the split halves of the reflected 0xA001 table,
laid out as auchCRCHi / auchCRCLo in the Modbus serial line specification:
TABLE_HI holds the low byte of each entry and TABLE_LO the high byte.
"""

from __future__ import annotations

from modbus_crc.constants import MODBUS_POLYNOMIAL


def _generate() -> tuple[int, ...]:
    table = []
    for index in range(256):
        crc = index
        for _ in range(8):
            if crc & 0x0001:
                crc = (crc >> 1) ^ MODBUS_POLYNOMIAL
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


_TABLE: tuple[int, ...] = _generate()

TABLE_HI: tuple[int, ...] = tuple(entry & 0xFF for entry in _TABLE)
TABLE_LO: tuple[int, ...] = tuple(entry >> 8 for entry in _TABLE)


def crc_table(index: int) -> int:
    """Return the 16-bit table entry for ``index`` (0..255)."""
    if not 0 <= index <= 0xFF:
        raise IndexError(f"table index out of range: {index}")
    return _TABLE[index]
