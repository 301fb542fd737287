"""Modbus CRC-16 (polynomial 0xA001 reflected, init 0xFFFF).

The engine keeps the running CRC as a register pair. ``hi`` carries the byte
that goes on the wire first, so the 16-bit value reads in frame order:
``01 03 00 00 00 01`` yields ``0x840A`` and is sent as ``84 0A``.
Use :func:`to_standard` for the catalogue form (``0x4B37`` for ``"123456789"``).
"""

from __future__ import annotations

from typing import Iterable, Union

from modbus_crc.constants import INITIAL_REGISTER
from modbus_crc.lut import TABLE_HI, TABLE_LO

ByteSequence = Union[bytes, bytearray, memoryview, Iterable[int]]


def _as_bytes(data: ByteSequence) -> bytes | bytearray:
    if isinstance(data, (bytes, bytearray)):
        return data
    # bytes() rejects values outside 0..255
    return bytes(data)


class ChecksumEngine:
    """Table-driven CRC-16/MODBUS over a (hi, lo) register pair."""

    __slots__ = ("hi", "lo")

    def __init__(self) -> None:
        self.hi = INITIAL_REGISTER
        self.lo = INITIAL_REGISTER

    def reset(self) -> None:
        self.hi = INITIAL_REGISTER
        self.lo = INITIAL_REGISTER

    def update(self, data: ByteSequence) -> None:
        hi = self.hi
        lo = self.lo
        for b in _as_bytes(data):
            index = hi ^ b
            hi = lo ^ TABLE_HI[index]
            lo = TABLE_LO[index]
        self.hi = hi
        self.lo = lo

    @property
    def value(self) -> int:
        return (self.hi << 8) | self.lo

    def calculate(self, data: ByteSequence) -> int:
        """Compute the CRC of ``data`` from the initial registers.

        Registers are reset first, so results never depend on earlier calls.
        """
        self.reset()
        self.update(data)
        return self.value

    def __repr__(self) -> str:
        return f"ChecksumEngine(hi=0x{self.hi:02X}, lo=0x{self.lo:02X})"


def crc16_modbus(data: ByteSequence) -> int:
    """Compute the Modbus CRC-16 of ``data`` in wire order."""
    return ChecksumEngine().calculate(data)


def crc16_modbus_bytes(data: ByteSequence) -> bytes:
    """Return the two CRC bytes in the order they are appended to a frame."""
    return crc16_modbus(data).to_bytes(2, "big")


def to_standard(value: int) -> int:
    """Swap between the wire-order value and the catalogue CRC-16/MODBUS value."""
    return ((value & 0xFF) << 8) | ((value >> 8) & 0xFF)


def append_crc(frame: bytes | bytearray) -> bytes:
    """Return ``frame`` with its CRC appended."""
    return bytes(frame) + crc16_modbus_bytes(frame)


def check_crc(frame_with_crc: bytes | bytearray) -> bool:
    """Validate a frame whose last two bytes are its CRC."""
    if len(frame_with_crc) < 3:
        return False
    data, received = frame_with_crc[:-2], frame_with_crc[-2:]
    return bytes(received) == crc16_modbus_bytes(data)
