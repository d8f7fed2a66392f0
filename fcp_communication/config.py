import logging

import serial

# Default serial settings for an FCP device.
FCP_SERIAL_SETTINGS = {
    "baudrate": 9600,
    "bytesize": serial.EIGHTBITS,
    "parity": serial.PARITY_NONE,
    "stopbits": serial.STOPBITS_ONE,
    "timeout": 1.0,
    "write_timeout": 1.0
}

# A global list of typical baud rates
BAUD_RATES = [9600, 19200, 38400, 57600, 115200]

# Requests are ';'-terminated on the wire.
REQUEST_TERMINATOR = b";"
# Replies contain "; " themselves, so they are newline-terminated.
REPLY_TERMINATOR = b"\n"

DEFAULT_ENCODING = "ascii"


def setup_logging(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Configures logging for the application.
    Pass level=logging.DEBUG to show every frame sent and received.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)

    # Removes old handlers if any
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(console_handler)

    return logger
