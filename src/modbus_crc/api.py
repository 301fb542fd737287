"""Request/response facade for the presentation layer."""

from __future__ import annotations

import logging
from typing import Annotated, Union

from pydantic import BaseModel, Field

from modbus_crc.benchmark import run_benchmark
from modbus_crc.constants import DEFAULT_INPUT, MAX_ITERATIONS, MIN_ITERATIONS
from modbus_crc.errors import ErrorKind, InputError
from modbus_crc.parser import parse_hex

_LOGGER = logging.getLogger(__name__)


class ChecksumRequest(BaseModel):
    text: str = DEFAULT_INPUT
    iterations: Annotated[int, Field(ge=MIN_ITERATIONS, le=MAX_ITERATIONS)] = 1


class ChecksumResponse(BaseModel):
    """Successful calculation. Durations are in seconds."""

    checksum_hex: str
    iterations: int
    total_duration: float
    average_duration: float
    single_duration: float


class ErrorResponse(BaseModel):
    error_kind: ErrorKind
    message: str


def calculate(request: ChecksumRequest) -> Union[ChecksumResponse, ErrorResponse]:
    """Parse the request text and benchmark its CRC.

    Input errors come back as an ErrorResponse without checksum or timings.
    """
    try:
        data = parse_hex(request.text)
    except InputError as err:
        _LOGGER.info("Input rejected (%s): %s", err.kind.value, err.message)
        return ErrorResponse(error_kind=err.kind, message=err.message)

    result = run_benchmark(data, request.iterations)
    return ChecksumResponse(
        checksum_hex=result.checksum_hex,
        iterations=result.iterations,
        total_duration=result.total_duration,
        average_duration=result.average_duration,
        single_duration=result.single_duration,
    )
