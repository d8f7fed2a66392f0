#!/usr/bin/env python3
"""
protocol.py

Implements framing for the FCP ASCII protocol on top of the request/response models.

Requests travel as their canonical form followed by ';'. Replies are the
rendered Response followed by a newline.

Usage Example:
    protocol = FCPProtocol()
    frame = protocol.create_command(Request.get(GetRequest.VOLTAGE))   # b"GET volt;"
    request = protocol.parse_request(b"SET v500;")
    response = protocol.parse_response(received_bytes)
"""

import logging
import re
from typing import Optional

from fcp_communication.config import DEFAULT_ENCODING, REPLY_TERMINATOR, REQUEST_TERMINATOR
from fcp_communication.errors import FCPError
from fcp_communication.models import Request, Response

NO_RESPONSE = "no response from device"

_STATUS_PATTERN = re.compile(r"status: (\d+); (.*)", re.DOTALL)


class FCPProtocol:
    """
    Builds and parses FCP frames.
    Holds no per-exchange state; one instance can serve any number of requests.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initializes the FCPProtocol.

        Args:
            logger (Optional[logging.Logger]): A logger instance for debugging.
        """
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.request_terminator = REQUEST_TERMINATOR
        self.reply_terminator = REPLY_TERMINATOR

    def create_command(self, request: Request) -> bytes:
        """
        Creates the request frame for transmission.

        Args:
            request (Request): The request to serialize.

        Returns:
            bytes: The canonical form plus the request terminator.
        """
        frame = request.to_bytes() + self.request_terminator
        self.logger.debug(f"Created FCP command: {frame!r}")
        return frame

    def parse_request(self, frame: bytes) -> Request:
        """
        Parses a received request frame.
        One trailing terminator and surrounding CR/LF are removed before parsing.

        Args:
            frame (bytes): The raw frame.

        Returns:
            Request: The typed request.

        Raises:
            FCPError: If the frame does not hold a well-formed request.
        """
        body = bytes(frame).strip(b"\r\n")
        if body.endswith(self.request_terminator):
            body = body[:-len(self.request_terminator)]
        try:
            request = Request.parse(body)
        except FCPError as e:
            self.logger.debug(f"Rejected FCP request {frame!r}: {e}")
            raise
        self.logger.debug(f"Parsed FCP request: {request!r}")
        return request

    def create_reply(self, response: Response) -> bytes:
        """
        Creates the reply frame for a response.

        Args:
            response (Response): The response to send.

        Returns:
            bytes: The rendered response plus the reply terminator.
        """
        frame = str(response).encode(DEFAULT_ENCODING, errors="replace") + self.reply_terminator
        self.logger.debug(f"Created FCP reply: {frame!r}")
        return frame

    def parse_response(self, raw: Optional[bytes]) -> Response:
        """
        Wraps a raw reply from the device in a Response.
        A "status: <code>; <detail>" reply with a non-zero code becomes a
        hardware error carrying the detail; plain text replies are payloads.

        Args:
            raw (Optional[bytes]): The reply bytes, empty or None on timeout.

        Returns:
            Response: Ok with the decoded payload, or a hardware error if the
                device reported a failure or nothing came back.
        """
        text = (raw or b"").decode(DEFAULT_ENCODING, errors="replace").strip()
        if not text:
            self.logger.error(NO_RESPONSE)
            return Response.err(FCPError.hardware(NO_RESPONSE))
        self.logger.debug(f"Parsing FCP response: {text}")
        match = _STATUS_PATTERN.fullmatch(text)
        if match is None:
            return Response.ok(text)
        code, detail = int(match.group(1)), match.group(2)
        if code != 0:
            self.logger.error(f"Device reported failure: {detail}")
            return Response.err(FCPError.hardware(detail))
        return Response.ok(detail)
