"""
__init__.py

Initializes the fcp_communication package by making the FCP codec available
through a single import point.
"""

from fcp_communication.errors import ErrorKind, FCPError
from fcp_communication.models import (
    AdjKind,
    AdjRequest,
    GetRequest,
    Method,
    Request,
    Response,
    SetKind,
    SetRequest,
    parse_request,
    render_request,
)
from fcp_communication.protocol import FCPProtocol

__all__ = [
    'AdjKind',
    'AdjRequest',
    'ErrorKind',
    'FCPError',
    'FCPProtocol',
    'GetRequest',
    'Method',
    'Request',
    'Response',
    'SetKind',
    'SetRequest',
    'parse_request',
    'render_request'
]
