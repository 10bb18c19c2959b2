# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the character-level source cursor."""

import io
from pathlib import Path

import pytest

from cplib.diagnostics import EndOfInputError, InvalidArgumentError, OpenFailureError
from cplib.io.scanner import SourceCursor, is_digit, is_space

# ###############
# Classification
# ###############


class TestClassification:
    @pytest.mark.parametrize("ch", [" ", "\t", "\r", "\n"])
    def test_whitespace_is_space(self, ch: str) -> None:
        assert is_space(ch)

    @pytest.mark.parametrize("ch", ["a", "0", "-", "\x0b", "\x0c", ""])
    def test_other_characters_are_not_space(self, ch: str) -> None:
        assert not is_space(ch)

    def test_all_ascii_digits(self) -> None:
        assert all(is_digit(ch) for ch in "0123456789")

    @pytest.mark.parametrize("ch", ["a", "-", ".", " ", "", "12", "٣"])
    def test_non_digits(self, ch: str) -> None:
        assert not is_digit(ch)


# ###############
# Reading
# ###############


class TestReadChar:
    def test_reads_characters_in_order(self) -> None:
        cursor = SourceCursor.from_bytes(b"ab")
        assert cursor.read_char() == "a"
        assert cursor.read_char() == "b"

    def test_end_of_input_raises(self) -> None:
        cursor = SourceCursor.from_bytes(b"")
        with pytest.raises(EndOfInputError):
            cursor.read_char()

    def test_end_of_input_is_idempotent(self) -> None:
        cursor = SourceCursor.from_bytes(b"x")
        cursor.read_char()
        for _ in range(3):
            with pytest.raises(EndOfInputError):
                cursor.read_char()

    def test_str_buffer_is_accepted(self) -> None:
        cursor = SourceCursor.from_bytes("1 2")
        assert [cursor.read_char() for _ in range(3)] == ["1", " ", "2"]

    def test_high_bytes_map_to_single_characters(self) -> None:
        cursor = SourceCursor.from_bytes(b"\xff")
        assert cursor.read_char() == "\xff"


class TestUnread:
    def test_unread_returns_same_character(self) -> None:
        cursor = SourceCursor.from_bytes(b"xy")
        assert cursor.read_char() == "x"
        cursor.unread_one()
        assert cursor.read_char() == "x"
        assert cursor.read_char() == "y"

    def test_unread_twice_is_rejected(self) -> None:
        cursor = SourceCursor.from_bytes(b"xy")
        cursor.read_char()
        cursor.unread_one()
        with pytest.raises(InvalidArgumentError):
            cursor.unread_one()

    def test_unread_before_any_read_is_rejected(self) -> None:
        cursor = SourceCursor.from_bytes(b"xy")
        with pytest.raises(InvalidArgumentError):
            cursor.unread_one()

    def test_unread_after_end_of_input_is_rejected(self) -> None:
        cursor = SourceCursor.from_bytes(b"")
        with pytest.raises(EndOfInputError):
            cursor.read_char()
        with pytest.raises(InvalidArgumentError):
            cursor.unread_one()


class TestPeek:
    def test_peek_does_not_consume(self) -> None:
        cursor = SourceCursor.from_bytes(b"q")
        assert cursor.peek_char() == "q"
        assert cursor.peek_char() == "q"
        assert cursor.read_char() == "q"

    def test_peek_at_end_returns_none(self) -> None:
        cursor = SourceCursor.from_bytes(b"")
        assert cursor.peek_char() is None
        assert cursor.at_end()

    def test_at_end_false_with_pending_pushback(self) -> None:
        cursor = SourceCursor.from_bytes(b"z")
        cursor.read_char()
        cursor.unread_one()
        assert not cursor.at_end()


# ###############
# Ownership
# ###############


class TestOwnership:
    def test_open_missing_file_raises_open_failure(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.txt"
        with pytest.raises(OpenFailureError) as exc_info:
            SourceCursor.open(missing)
        assert str(missing) in exc_info.value.message
        assert exc_info.value.path == str(missing)

    def test_open_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "input.txt"
        path.write_bytes(b"7")
        cursor = SourceCursor.open(path)
        assert cursor.owned
        assert cursor.read_char() == "7"
        cursor.close()
        assert cursor.closed

    def test_close_is_idempotent(self) -> None:
        cursor = SourceCursor.from_bytes(b"")
        cursor.close()
        cursor.close()
        assert cursor.closed

    def test_borrowed_stream_is_not_closed(self) -> None:
        stream = io.BytesIO(b"abc")
        cursor = SourceCursor(stream)
        cursor.close()
        assert not stream.closed

    def test_owned_stream_is_closed(self) -> None:
        stream = io.BytesIO(b"abc")
        cursor = SourceCursor(stream, owned=True)
        cursor.close()
        assert stream.closed
