"""
param_types.py

Defines the integer parameter types carried by FCP requests and the decimal
grammar used to read them off the wire.
"""

import re
from enum import Enum

from fcp_communication.errors import ErrorKind, FCPError

_UNSIGNED_PATTERN = re.compile(rb"\+?[0-9]+")
_SIGNED_PATTERN = re.compile(rb"[+-]?[0-9]+")


class ParamType(Enum):
    """
    Enumeration of integer widths used in FCP values.
    Each member holds (min_value, max_value).
    """
    UINT8 = (0, 0xFF)
    UINT16 = (0, 0xFFFF)
    INT8 = (-0x80, 0x7F)
    INT16 = (-0x8000, 0x7FFF)

    @property
    def min_value(self) -> int:
        return self.value[0]

    @property
    def max_value(self) -> int:
        return self.value[1]

    @property
    def signed(self) -> bool:
        return self.min_value < 0


def parse_int(data: bytes, param_type: ParamType) -> int:
    """
    Parses an ASCII decimal integer that must fit in param_type.

    A leading '+' is always allowed; a leading '-' only for signed types.
    At least one digit is required and nothing may follow the digits.

    Args:
        data: The raw digits (with optional sign).
        param_type: The target integer width.

    Returns:
        The parsed integer.

    Raises:
        FCPError: INVALID_VALUE for any grammar violation or overflow.
    """
    pattern = _SIGNED_PATTERN if param_type.signed else _UNSIGNED_PATTERN
    if not pattern.fullmatch(data):
        raise FCPError(ErrorKind.INVALID_VALUE)
    value = int(data)
    if not param_type.min_value <= value <= param_type.max_value:
        raise FCPError(ErrorKind.INVALID_VALUE)
    return value


def check_range(value: int, param_type: ParamType) -> int:
    """
    Validates a value supplied by code (not by the wire) for param_type.

    Raises:
        ValueError: If value is not an int or does not fit.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected an integer for {param_type.name}, got {value!r}")
    if not param_type.min_value <= value <= param_type.max_value:
        raise ValueError(
            f"{value} out of range for {param_type.name} "
            f"({param_type.min_value}..{param_type.max_value})"
        )
    return value
