"""
models.py

Defines the typed FCP requests and responses.

A request on the wire reads "<METHOD> <VALUE>", e.g. "GET volt", "SET v500"
or "ADJ %-5". Every model here parses its own value portion from raw bytes
and renders the canonical text back, so that for any request r:

    Request.parse(str(r)) == r

Usage Example:
    request = Request.parse(b"SET %93")
    request.method()          # "SET"
    request.body              # SetRequest.percentage(93)
    str(Request.adj(AdjRequest.voltage(-11)))   # "ADJ v-11"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from fcp_communication.errors import ErrorKind, FCPError
from fcp_communication.param_types import ParamType, check_range, parse_int

RawRequest = Union[bytes, bytearray, str]


class GetRequest(Enum):
    """
    Enumeration of readable quantities. The value of each member is its wire token.
    """
    ALL = "all"
    CONFIG = "cfg"
    PERCENTAGE = "%"
    TEMPERATURE = "temp"
    VOLTAGE = "volt"

    @classmethod
    def parse(cls, value: bytes) -> "GetRequest":
        """
        Parses the value portion of a GET request.

        Raises:
            FCPError: INVALID_VALUE unless value is exactly one of the tokens.
        """
        member = _GET_TOKENS.get(bytes(value))
        if member is None:
            raise FCPError(ErrorKind.INVALID_VALUE)
        return member

    def val_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


_GET_TOKENS = {member.value.encode("ascii"): member for member in GetRequest}


class SetKind(Enum):
    """
    Targets of a SET request: (wire prefix, parameter type).
    """
    AUTO = ("a", None)
    VOLTAGE = ("v", ParamType.UINT16)
    PERCENTAGE = ("%", ParamType.UINT8)

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def param_type(self) -> Optional[ParamType]:
        return self.value[1]


class AdjKind(Enum):
    """
    Targets of an ADJ request: (wire prefix, parameter type).
    """
    VOLTAGE = ("v", ParamType.INT16)
    PERCENTAGE = ("%", ParamType.INT8)

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def param_type(self) -> ParamType:
        return self.value[1]


_SET_PREFIXES = {kind.prefix.encode("ascii"): kind for kind in SetKind}
_ADJ_PREFIXES = {kind.prefix.encode("ascii"): kind for kind in AdjKind}


@dataclass(frozen=True)
class SetRequest:
    """
    Sets an absolute target, or hands control back to the device (auto).

    Attributes:
        kind: What is being set.
        value: The unsigned target; None for auto.
    """
    kind: SetKind
    value: Optional[int] = None

    def __post_init__(self):
        if self.kind is SetKind.AUTO:
            if self.value is not None:
                raise ValueError("SET auto takes no value")
        else:
            check_range(self.value, self.kind.param_type)

    @classmethod
    def auto(cls) -> "SetRequest":
        return cls(SetKind.AUTO)

    @classmethod
    def voltage(cls, value: int) -> "SetRequest":
        return cls(SetKind.VOLTAGE, value)

    @classmethod
    def percentage(cls, value: int) -> "SetRequest":
        return cls(SetKind.PERCENTAGE, value)

    @classmethod
    def parse(cls, value: bytes) -> "SetRequest":
        """
        Parses the value portion of a SET request: "a", "v<uint16>" or "%<uint8>".

        Raises:
            FCPError: MISSING_VALUE if value is empty, INVALID_VALUE otherwise.
        """
        value = bytes(value)
        if not value:
            raise FCPError(ErrorKind.MISSING_VALUE)
        if value == b"a":
            return cls.auto()
        kind = _SET_PREFIXES.get(value[:1])
        # "a" followed by anything is not auto
        if kind is None or kind is SetKind.AUTO:
            raise FCPError(ErrorKind.INVALID_VALUE)
        return cls(kind, parse_int(value[1:], kind.param_type))

    def val_str(self) -> str:
        if self.kind is SetKind.AUTO:
            return self.kind.prefix
        return f"{self.kind.prefix}{self.value}"

    def __str__(self) -> str:
        return self.val_str()

    def __repr__(self) -> str:
        if self.kind is SetKind.AUTO:
            return "SetRequest.auto()"
        return f"SetRequest.{self.kind.name.lower()}({self.value})"


@dataclass(frozen=True)
class AdjRequest:
    """
    Adjusts a quantity by a signed delta relative to its current state.

    Attributes:
        kind: What is being adjusted.
        delta: The signed change.
    """
    kind: AdjKind
    delta: int

    def __post_init__(self):
        check_range(self.delta, self.kind.param_type)

    @classmethod
    def voltage(cls, delta: int) -> "AdjRequest":
        return cls(AdjKind.VOLTAGE, delta)

    @classmethod
    def percentage(cls, delta: int) -> "AdjRequest":
        return cls(AdjKind.PERCENTAGE, delta)

    @classmethod
    def parse(cls, value: bytes) -> "AdjRequest":
        """
        Parses the value portion of an ADJ request: "v<int16>" or "%<int8>".

        Raises:
            FCPError: MISSING_VALUE if value is empty, INVALID_VALUE otherwise.
        """
        value = bytes(value)
        if not value:
            raise FCPError(ErrorKind.MISSING_VALUE)
        kind = _ADJ_PREFIXES.get(value[:1])
        if kind is None:
            raise FCPError(ErrorKind.INVALID_VALUE)
        return cls(kind, parse_int(value[1:], kind.param_type))

    def val_str(self) -> str:
        return f"{self.kind.prefix}{self.delta}"

    def __str__(self) -> str:
        return self.val_str()

    def __repr__(self) -> str:
        return f"AdjRequest.{self.kind.name.lower()}({self.delta})"


class Method(Enum):
    """
    Enumeration of method words. The value of each member is the word on the wire.
    """
    GET = "GET"
    SET = "SET"
    ADJ = "ADJ"

    @property
    def body_type(self):
        return _BODY_TYPES[self]


_BODY_TYPES = {
    Method.GET: GetRequest,
    Method.SET: SetRequest,
    Method.ADJ: AdjRequest,
}

_METHOD_WORDS = {method.value.encode("ascii"): method for method in Method}


@dataclass(frozen=True)
class Request:
    """
    A complete FCP request: a method word and the matching value.

    Attributes:
        kind: The method.
        body: GetRequest, SetRequest or AdjRequest, matching kind.
    """
    kind: Method
    body: Union[GetRequest, SetRequest, AdjRequest]

    def __post_init__(self):
        if not isinstance(self.body, self.kind.body_type):
            raise TypeError(
                f"{self.kind.value} requests take a {self.kind.body_type.__name__}, "
                f"got {type(self.body).__name__}"
            )

    @classmethod
    def get(cls, body: GetRequest) -> "Request":
        return cls(Method.GET, body)

    @classmethod
    def set(cls, body: SetRequest) -> "Request":
        return cls(Method.SET, body)

    @classmethod
    def adj(cls, body: AdjRequest) -> "Request":
        return cls(Method.ADJ, body)

    @classmethod
    def parse(cls, data: RawRequest) -> "Request":
        """
        Parses a raw request such as b"SET v500".

        The input is split on the first space only; everything after it is the
        value and is handed to the parser of the method's value type.

        Args:
            data: The request without any transport terminator. str input is
                encoded as UTF-8 first.

        Returns:
            The typed Request.

        Raises:
            FCPError: EMPTY if the input is empty, UNKNOWN_REQUEST_TYPE for
                an unrecognized method word, MISSING_VALUE for a known method
                word with no value, INVALID_VALUE if the value is malformed.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        word, separator, value = bytes(data).partition(b" ")
        if not word and not separator:
            raise FCPError(ErrorKind.EMPTY)
        method = _METHOD_WORDS.get(word)
        if method is None:
            raise FCPError(ErrorKind.UNKNOWN_REQUEST_TYPE)
        if not separator:
            raise FCPError(ErrorKind.MISSING_VALUE)
        return cls(method, method.body_type.parse(value))

    def method(self) -> str:
        return self.kind.value

    def val_str(self) -> str:
        return self.body.val_str()

    def to_bytes(self) -> bytes:
        return str(self).encode("ascii")

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return f"{self.method()} {self.val_str()}"

    def __repr__(self) -> str:
        if isinstance(self.body, GetRequest):
            body = f"GetRequest.{self.body.name}"
        else:
            body = repr(self.body)
        return f"Request.{self.kind.name.lower()}({body})"


@dataclass(frozen=True)
class Response:
    """
    A reply to a request: either a text payload or an FCPError.

    Attributes:
        payload: The success payload, None on error.
        error: The failure, None on success.
    """
    payload: Optional[str] = None
    error: Optional[FCPError] = None

    def __post_init__(self):
        if (self.payload is None) == (self.error is None):
            raise ValueError("A response holds exactly one of payload or error")

    @classmethod
    def ok(cls, payload: str) -> "Response":
        return cls(payload=payload)

    @classmethod
    def err(cls, error: Union[FCPError, ErrorKind]) -> "Response":
        if isinstance(error, ErrorKind):
            error = FCPError(error)
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def code(self) -> int:
        """Numeric status: 0 on success, 1 on error."""
        return 0 if self.is_ok else 1

    def __repr__(self) -> str:
        if self.is_ok:
            return f"Ok({self.payload!r})"
        return f"Err({self.error!r})"

    def __str__(self) -> str:
        return f"status: {self.code()}; {self!r}"


def parse_request(data: RawRequest) -> Request:
    """Parses a raw request. See Request.parse."""
    return Request.parse(data)


def render_request(request: Request) -> str:
    """Renders the canonical wire form of a request, without terminator."""
    return str(request)
