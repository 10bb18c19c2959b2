# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character-level access to a byte source with one character of lookahead."""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO

from cplib.diagnostics import EndOfInputError, InvalidArgumentError, OpenFailureError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def is_space(ch: str) -> bool:
    """Return True for the whitespace characters recognised by the reader."""
    return ch in _SPACES


def is_digit(ch: str) -> bool:
    """Return True for the ASCII decimal digits."""
    return len(ch) == 1 and "0" <= ch <= "9"


class SourceCursor:
    """Reads one character at a time from a binary stream.

    Bytes are surfaced as one-character strings using the latin-1 mapping, so
    every byte value round-trips. At most one character can be pushed back.

    Owned streams (opened by :meth:`open` or :meth:`from_bytes`) are closed by
    :meth:`close`; borrowed streams are left open for their owner.
    """

    def __init__(self, stream: BinaryIO, *, owned: bool = False) -> None:
        self._stream = stream
        self._owned = owned
        self._closed = False
        self._last: str | None = None
        self._pushback: str | None = None

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> SourceCursor:
        """Open *path* for reading.

        Raises:
            OpenFailureError: If the file cannot be opened.
        """
        try:
            stream = open(path, "rb")
        except OSError:
            raise OpenFailureError(os.fspath(path)) from None
        logger.debug("Opened input %s", path)
        return cls(stream, owned=True)

    @classmethod
    def from_bytes(cls, data: bytes | str) -> SourceCursor:
        """Create a cursor over an in-memory buffer."""
        if isinstance(data, str):
            data = data.encode("latin-1")
        return cls(io.BytesIO(data), owned=True)

    @property
    def owned(self) -> bool:
        return self._owned

    @property
    def closed(self) -> bool:
        return self._closed

    def read_char(self) -> str:
        """Consume and return the next character.

        Raises:
            EndOfInputError: If the source is exhausted. Repeated calls keep raising.
        """
        if self._pushback is not None:
            ch = self._pushback
            self._pushback = None
        else:
            data = self._stream.read(1)
            if not data:
                self._last = None
                raise EndOfInputError()
            ch = data.decode("latin-1")
        self._last = ch
        return ch

    def unread_one(self) -> None:
        """Push back the character returned by the last :meth:`read_char` call.

        Raises:
            InvalidArgumentError: If there is no character to push back, either
                because nothing was read since the last push back or because
                the last read hit end of input.
        """
        if self._last is None or self._pushback is not None:
            raise InvalidArgumentError("No character available to unread")
        self._pushback = self._last
        self._last = None

    def peek_char(self) -> str | None:
        """Return the next character without consuming it, or None at end of input."""
        if self._pushback is not None:
            return self._pushback
        try:
            self.read_char()
        except EndOfInputError:
            return None
        self.unread_one()
        return self._pushback

    def at_end(self) -> bool:
        """Return True if no characters remain."""
        return self.peek_char() is None

    def close(self) -> None:
        """Release the stream if this cursor owns it. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        if self._owned:
            self._stream.close()
            logger.debug("Closed input stream")


# ################
# Implementation
# ################

_SPACES = frozenset(" \t\r\n")
