"""Regression tests for raw-key decoding.

Covers control-byte mapping, ESC lookahead, and the paired-newline peek.
Pipes stand in for the terminal; raw-mode switching is mocked separately.
"""

from __future__ import annotations

import os
import unittest
from unittest import mock

from namenormalizer import input as input_mod
from namenormalizer.errors import TerminalSessionError
from namenormalizer.input import KeyEvent, KeyKind
from namenormalizer.terminal import SAVED_STATE


def _read_keys(payload: bytes, count: int, *, close_writer: bool = False) -> list[KeyEvent]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        if close_writer:
            os.close(write_fd)
        return [input_mod.read_key(read_fd, raw=False) for _ in range(count)]
    finally:
        os.close(read_fd)
        if not close_writer:
            os.close(write_fd)


class ReadKeyDecodingTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_control_bytes_map_to_logical_keys(self) -> None:
        cases = {
            b"\x03": KeyKind.QUIT,
            b"q": KeyKind.QUIT,
            b"Q": KeyKind.QUIT,
            b"\x01": KeyKind.TOGGLE_ALL,
            b"\x06": KeyKind.START_FILTER,
            b"k": KeyKind.UP,
            b"\x10": KeyKind.UP,
            b"j": KeyKind.DOWN,
            b"\x0e": KeyKind.DOWN,
            b"\x00": KeyKind.TOGGLE,
            b" ": KeyKind.TOGGLE,
            b"\x7f": KeyKind.BACKSPACE,
            b"\x02": KeyKind.OTHER,
            b"\x80": KeyKind.OTHER,
        }
        for payload, expected in cases.items():
            with self.subTest(payload=payload):
                (key,) = _read_keys(payload, 1)
                self.assertEqual(key.kind, expected)

    def test_printable_byte_becomes_char_event(self) -> None:
        keys = _read_keys(b"x,I~", 4)
        self.assertEqual(
            keys,
            [KeyEvent.of_char("x"), KeyEvent.of_char(","), KeyEvent.of_char("I"), KeyEvent.of_char("~")],
        )

    def test_single_escape_returns_escape_without_blocking(self) -> None:
        (key,) = _read_keys(b"\x1b", 1)
        self.assertEqual(key.kind, KeyKind.ESCAPE)

    def test_arrow_sequences_resolve_to_up_and_down(self) -> None:
        up, down = _read_keys(b"\x1b[A", 1) + _read_keys(b"\x1b[B", 1)
        self.assertEqual(up.kind, KeyKind.UP)
        self.assertEqual(down.kind, KeyKind.DOWN)

    def test_other_escape_sequences_resolve_to_escape(self) -> None:
        (right,) = _read_keys(b"\x1b[C", 1)
        (alt_x,) = _read_keys(b"\x1bx", 1)
        self.assertEqual(right.kind, KeyKind.ESCAPE)
        self.assertEqual(alt_x.kind, KeyKind.ESCAPE)

    def test_escape_lookahead_restores_blocking_mode(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            self.assertTrue(os.get_blocking(read_fd))
            input_mod.read_key(read_fd, raw=False)
            self.assertTrue(os.get_blocking(read_fd))
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_crlf_counts_as_one_enter(self) -> None:
        first, second = _read_keys(b"\r\nj", 2)
        self.assertEqual(first.kind, KeyKind.ENTER)
        self.assertEqual(second.kind, KeyKind.DOWN)

    def test_lfcr_counts_as_one_enter(self) -> None:
        first, second = _read_keys(b"\n\rk", 2)
        self.assertEqual(first.kind, KeyKind.ENTER)
        self.assertEqual(second.kind, KeyKind.UP)

    def test_enter_peek_keeps_unrelated_following_byte(self) -> None:
        first, second = _read_keys(b"\rq", 2)
        self.assertEqual(first.kind, KeyKind.ENTER)
        self.assertEqual(second.kind, KeyKind.QUIT)

    def test_double_cr_is_two_enters(self) -> None:
        first, second = _read_keys(b"\r\r", 2)
        self.assertEqual(first.kind, KeyKind.ENTER)
        self.assertEqual(second.kind, KeyKind.ENTER)

    def test_eof_yields_other(self) -> None:
        (key,) = _read_keys(b"", 1, close_writer=True)
        self.assertEqual(key.kind, KeyKind.OTHER)


class ReadKeyRawModeTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()
        SAVED_STATE.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()
        SAVED_STATE.clear()

    def test_raw_read_publishes_cooked_state_and_restores_it(self) -> None:
        cooked = [0, 0, 0, 0, 0, 0, [b"\x00"] * 32]
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"j")
            with mock.patch(
                "namenormalizer.terminal.termios.tcgetattr", return_value=cooked
            ), mock.patch("namenormalizer.terminal.termios.tcsetattr") as setattr_mock:
                key = input_mod.read_key(read_fd)
                self.assertIs(SAVED_STATE.attrs, cooked)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key.kind, KeyKind.DOWN)
        self.assertEqual(setattr_mock.call_count, 2)
        self.assertNotEqual(setattr_mock.call_args_list[0].args[2], cooked)
        self.assertEqual(setattr_mock.call_args_list[1].args[2], cooked)

    def test_raw_read_restores_cooked_state_when_read_fails(self) -> None:
        cooked = [0, 0, 0, 0, 0, 0, [b"\x00"] * 32]
        with mock.patch(
            "namenormalizer.terminal.termios.tcgetattr", return_value=cooked
        ), mock.patch("namenormalizer.terminal.termios.tcsetattr") as setattr_mock, mock.patch(
            "namenormalizer.input.reader.os.read", side_effect=OSError("boom")
        ):
            with self.assertRaises(OSError):
                input_mod.read_key(0)

        self.assertEqual(setattr_mock.call_args_list[-1].args[2], cooked)

    def test_raw_read_on_non_tty_raises_session_error(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"j")
            with self.assertRaises(TerminalSessionError):
                input_mod.read_key(read_fd)
        finally:
            os.close(read_fd)
            os.close(write_fd)


if __name__ == "__main__":
    unittest.main()
