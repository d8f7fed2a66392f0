#main.py
"""
Main entry point for the FCP command-line tool.

    fcp parse "SET v500"
    fcp send --port /dev/ttyUSB0 "GET volt"
"""

import argparse
import logging
import sys

from fcp_communication.communicator import FCPCommunicator
from fcp_communication.config import FCP_SERIAL_SETTINGS, setup_logging
from fcp_communication.errors import FCPError
from fcp_communication.models import Request


def setup_exception_handling(logger):
    """
    Configures a global exception handler that logs uncaught errors.
    logger: The Logger instance to record errors.
    """

    def handle_exception(exc_type, exc_value, exc_traceback):
        # Lets KeyboardInterrupt end the program quietly
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.error("Uncaught exception:", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fcp", description="FCP request codec and serial client")
    parser.add_argument("--debug", action="store_true", help="show every frame sent and received")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="parse a request and print its canonical form")
    parse_cmd.add_argument("request", help='request text, e.g. "SET v500"')

    send_cmd = subparsers.add_parser("send", help="send a request to a device and print the reply")
    send_cmd.add_argument("request", help='request text, e.g. "GET volt"')
    send_cmd.add_argument("--port", type=str, required=True, help="serial port or pyserial URL")
    send_cmd.add_argument("--baudrate", type=int, default=FCP_SERIAL_SETTINGS["baudrate"],
                          help=f"baud rate (default: {FCP_SERIAL_SETTINGS['baudrate']})")
    send_cmd.add_argument("--timeout", type=float, default=FCP_SERIAL_SETTINGS["timeout"],
                          help=f"reply timeout in seconds (default: {FCP_SERIAL_SETTINGS['timeout']})")
    return parser


def run_parse(args, logger) -> int:
    try:
        request = Request.parse(args.request)
    except FCPError as e:
        logger.debug(f"Parse of {args.request!r} failed: {e.kind.name}")
        print(f"error: {e}")
        return 1
    print(repr(request))
    print(request)
    return 0


def run_send(args, logger) -> int:
    try:
        request = Request.parse(args.request)
    except FCPError as e:
        print(f"error: {e}")
        return 1

    communicator = FCPCommunicator(
        args.port,
        settings={"baudrate": args.baudrate, "timeout": args.timeout},
        logger=logger,
    )
    if not communicator.connect():
        print(f"error: could not open {args.port}")
        return 1
    try:
        response = communicator.send_request(request)
    finally:
        communicator.disconnect()
    print(response)
    return response.code()


def main(argv=None) -> int:
    """
    Parses the command line, sets up logging and runs the chosen command.
    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)
    logger = setup_logging("FCP", logging.DEBUG if args.debug else logging.WARNING)
    setup_exception_handling(logger)

    if args.command == "parse":
        return run_parse(args, logger)
    return run_send(args, logger)


if __name__ == "__main__":
    sys.exit(main())
