"""
errors.py

Defines the failure kinds of the FCP codec and the single exception type
that carries them.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """
    Enumeration of every way an FCP request can fail.
    The value of each member is its fixed, human-readable message.
    """
    EMPTY = "empty request"
    UNKNOWN_REQUEST_TYPE = "unknown request type"
    MISSING_VALUE = "missing value"
    INVALID_VALUE = "invalid value"
    HARDWARE = "hardware"

    @property
    def debug_name(self) -> str:
        """CamelCase name used in structural debug output (e.g. "InvalidValue")."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class FCPError(ValueError):
    """
    Raised by the codec when a request cannot be parsed.

    Attributes:
        kind: The ErrorKind naming the failure.
        detail: Free-text diagnostic, only set for hardware errors.
    """

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None):
        if kind is ErrorKind.HARDWARE and detail is None:
            raise ValueError("Hardware errors need a detail message")
        if kind is not ErrorKind.HARDWARE and detail is not None:
            raise ValueError(f"{kind.name} errors carry no detail")
        super().__init__(detail if detail is not None else kind.value)
        self.kind = kind
        self.detail = detail

    @classmethod
    def hardware(cls, detail: str) -> "FCPError":
        """Builds the hardware-diagnostic variant reported by a device layer."""
        return cls(ErrorKind.HARDWARE, detail)

    def __str__(self) -> str:
        return self.detail if self.kind is ErrorKind.HARDWARE else self.kind.value

    def __repr__(self) -> str:
        if self.kind is ErrorKind.HARDWARE:
            return f"Hardware({self.detail!r})"
        return self.kind.debug_name

    def __eq__(self, other) -> bool:
        if not isinstance(other, FCPError):
            return NotImplemented
        return (self.kind, self.detail) == (other.kind, other.detail)

    def __hash__(self) -> int:
        return hash((self.kind, self.detail))

    def __reduce__(self):
        return self.__class__, (self.kind, self.detail)
