"""Input errors raised while parsing hex text."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    ODD_LENGTH = "OddLength"
    TOO_LONG = "TooLong"
    HEX_PARSE = "HexParse"


class InputError(ValueError):
    """A user-correctable problem with the entered text."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OddLengthError(InputError):
    kind = ErrorKind.ODD_LENGTH

    def __init__(self, length: int) -> None:
        super().__init__(
            f"Odd number of hex digits ({length}): every byte needs exactly two digits"
        )
        self.length = length


class TooLongError(InputError):
    kind = ErrorKind.TOO_LONG

    def __init__(self, byte_count: int, limit: int) -> None:
        super().__init__(f"Input is {byte_count} bytes long, the limit is {limit}")
        self.byte_count = byte_count
        self.limit = limit


class HexParseError(InputError):
    kind = ErrorKind.HEX_PARSE

    def __init__(self, group: str, position: int) -> None:
        super().__init__(f"Invalid hex byte {group!r} at position {position}")
        self.group = group
        self.position = position
