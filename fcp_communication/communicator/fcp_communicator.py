"""
fcp_communicator.py

Implements the FCPCommunicator class, a thin pyserial wrapper that moves FCP
frames over a serial port. All encoding and parsing is delegated to FCPProtocol.
"""

import logging
from typing import Any, Dict, List, Optional

import serial
from serial.tools import list_ports

from fcp_communication.config import FCP_SERIAL_SETTINGS
from fcp_communication.errors import FCPError
from fcp_communication.models import Request, Response
from fcp_communication.protocol import FCPProtocol


class FCPCommunicator:
    """
    Sends FCP requests to a device and reads its replies.
    Any port URL understood by pyserial works, e.g. "/dev/ttyUSB0", "COM3" or "loop://".
    """

    def __init__(self, port: str, settings: Optional[Dict[str, Any]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initializes the communicator.

        Args:
            port: The serial port identifier or pyserial URL.
            settings: Serial parameters overriding FCP_SERIAL_SETTINGS.
            logger: Optional logger instance.
        """
        self.port = port
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.protocol = FCPProtocol(logger=self.logger)
        self.ser: Optional[serial.SerialBase] = None
        self.current_settings = dict(FCP_SERIAL_SETTINGS)
        if settings:
            self.current_settings.update(settings)

    @property
    def is_connected(self) -> bool:
        return bool(self.ser and self.ser.is_open)

    def connect(self) -> bool:
        """
        Opens the serial port with the current settings.

        Returns:
            True if connection is successful, False otherwise.
        """
        try:
            self.ser = serial.serial_for_url(self.port, **self.current_settings)
            self.logger.info(f"Connected to FCP device on {self.port}")
            return True
        except (serial.SerialException, ValueError) as e:
            self.logger.error(f"Connection failed: {str(e)}")
            return False

    def disconnect(self) -> bool:
        """
        Closes the serial port.

        Returns:
            True if an open port was closed, False otherwise.
        """
        if not self.is_connected:
            return False
        try:
            self.ser.close()
            self.logger.info(f"Disconnected from {self.port}")
            return True
        except serial.SerialException as e:
            self.logger.error(f"Error disconnecting: {str(e)}")
            return False

    def write_request(self, request: Request) -> None:
        """
        Writes one framed request.

        Raises:
            serial.SerialException: If the port is closed or the write fails.
        """
        self._require_connection()
        self.ser.write(self.protocol.create_command(request))
        self.ser.flush()

    def read_request(self) -> Request:
        """
        Reads one ';'-terminated frame and parses it.

        Raises:
            serial.SerialException: If the port is closed.
            FCPError: If the frame is not a well-formed request.
        """
        self._require_connection()
        frame = self.ser.read_until(self.protocol.request_terminator)
        self.logger.debug(f"Received request frame: {frame!r}")
        return self.protocol.parse_request(frame)

    def write_response(self, response: Response) -> None:
        """
        Writes one newline-terminated reply.

        Raises:
            serial.SerialException: If the port is closed or the write fails.
        """
        self._require_connection()
        self.ser.write(self.protocol.create_reply(response))
        self.ser.flush()

    def read_reply(self) -> Response:
        """
        Reads one reply line; a timeout yields a hardware error response.

        Raises:
            serial.SerialException: If the port is closed.
        """
        self._require_connection()
        raw = self.ser.read_until(self.protocol.reply_terminator)
        if raw:
            self.logger.debug(f"Received reply: {raw!r}")
        return self.protocol.parse_response(raw)

    def send_request(self, request: Request) -> Response:
        """
        Sends a request and waits for the reply. Does not retry.

        Args:
            request: The request to send.

        Returns:
            The device's Response, or a hardware error Response when the port
            fails or nothing comes back before the timeout.
        """
        try:
            self._require_connection()
            self.ser.reset_input_buffer()
            self.logger.debug(f"Sending request: {request}")
            self.write_request(request)
            return self.read_reply()
        except serial.SerialException as e:
            self.logger.error(f"Request {request} failed: {str(e)}")
            return Response.err(FCPError.hardware(str(e)))

    def _require_connection(self) -> None:
        if not self.is_connected:
            raise serial.SerialException("Not connected")

    @staticmethod
    def list_ports() -> List[str]:
        """
        Lists available serial ports.

        Returns:
            A list of available port names.
        """
        return [p.device for p in list_ports.comports()]
