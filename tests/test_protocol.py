#!/usr/bin/env python3
# tests/test_protocol.py

import sys
import os
import unittest

# Adds the project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fcp_communication.errors import ErrorKind, FCPError
from fcp_communication.models import AdjRequest, GetRequest, Request, Response, SetRequest
from fcp_communication.protocol import NO_RESPONSE, FCPProtocol


class TestFCPProtocol(unittest.TestCase):
    def setUp(self):
        self.protocol = FCPProtocol()

    def test_create_command_appends_terminator(self):
        frame = self.protocol.create_command(Request.get(GetRequest.VOLTAGE))
        self.assertEqual(frame, b"GET volt;")

    def test_create_command_logs_frame(self):
        with self.assertLogs("FCPProtocol", level="DEBUG") as logs:
            self.protocol.create_command(Request.set(SetRequest.auto()))
        self.assertIn("SET a;", logs.output[0])

    def test_parse_request_strips_framing(self):
        cases = [
            (b"SET v500;", Request.set(SetRequest.voltage(500))),
            (b"ADJ v-11;\r\n", Request.adj(AdjRequest.voltage(-11))),
            (b"GET cfg", Request.get(GetRequest.CONFIG)),
        ]
        for frame, expected in cases:
            self.assertEqual(self.protocol.parse_request(frame), expected)

    def test_parse_request_strips_only_one_terminator(self):
        with self.assertRaises(FCPError) as ctx:
            self.protocol.parse_request(b"SET v5;;")
        self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_VALUE)

    def test_parse_request_errors_propagate(self):
        with self.assertRaises(FCPError) as ctx:
            self.protocol.parse_request(b";")
        self.assertEqual(ctx.exception.kind, ErrorKind.EMPTY)
        with self.assertRaises(FCPError) as ctx:
            self.protocol.parse_request(b"SET;")
        self.assertEqual(ctx.exception.kind, ErrorKind.MISSING_VALUE)

    def test_frame_round_trip(self):
        request = Request.adj(AdjRequest.percentage(-25))
        self.assertEqual(self.protocol.parse_request(self.protocol.create_command(request)), request)

    def test_create_reply(self):
        self.assertEqual(
            self.protocol.create_reply(Response.err(ErrorKind.MISSING_VALUE)),
            b"status: 1; Err(MissingValue)\n"
        )
        self.assertEqual(self.protocol.create_reply(Response.ok("42")), b"status: 0; Ok('42')\n")

    def test_parse_response(self):
        self.assertEqual(self.protocol.parse_response(b"12.5 V\n"), Response.ok("12.5 V"))

    def test_parse_response_status_frames(self):
        with self.assertLogs("FCPProtocol", level="ERROR"):
            failure = self.protocol.parse_response(b"status: 1; Err(Hardware('fan stalled'))\n")
        self.assertEqual(failure, Response.err(FCPError.hardware("Err(Hardware('fan stalled'))")))
        self.assertEqual(failure.code(), 1)

        success = self.protocol.parse_response(b"status: 0; Ok('42')\n")
        self.assertEqual(success, Response.ok("Ok('42')"))
        self.assertEqual(success.code(), 0)

    def test_reply_status_survives_framing(self):
        reply = self.protocol.create_reply(Response.err(ErrorKind.MISSING_VALUE))
        with self.assertLogs("FCPProtocol", level="ERROR"):
            self.assertEqual(self.protocol.parse_response(reply).code(), 1)
        reply = self.protocol.create_reply(Response.ok("42"))
        self.assertEqual(self.protocol.parse_response(reply).code(), 0)

    def test_parse_response_timeout(self):
        expected = Response.err(FCPError.hardware(NO_RESPONSE))
        with self.assertLogs("FCPProtocol", level="ERROR"):
            self.assertEqual(self.protocol.parse_response(b""), expected)
        with self.assertLogs("FCPProtocol", level="ERROR"):
            self.assertEqual(self.protocol.parse_response(None), expected)


if __name__ == "__main__":
    unittest.main()
