# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Output counterpart of the reader, used by generators and reference solutions."""

from __future__ import annotations

import io
import logging
import math
import os
from collections.abc import Iterable
from decimal import Decimal
from typing import Any, BinaryIO

from cplib.diagnostics import InvalidArgumentError, OpenFailureError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Writer:
    """Writes tokens in the format the :class:`~cplib.io.reader.Reader` expects.

    Like the reader, a writer owns the file it opened and leaves borrowed
    streams open. Floating-point values use the configured decimal separator.
    """

    def __init__(self, dest: str | os.PathLike[str] | None = None) -> None:
        """Open *dest* for writing, or write to an in-memory buffer when *dest* is None.

        Raises:
            OpenFailureError: If *dest* cannot be opened.
        """
        if dest is None:
            self._dest: BinaryIO = io.BytesIO()
        else:
            try:
                self._dest = open(dest, "wb")
            except OSError:
                raise OpenFailureError(os.fspath(dest)) from None
            logger.debug("Opened output %s", dest)
        self._owned = True
        self._closed = False
        self._decimal_separator = "."

    @classmethod
    def to_stream(cls, stream: BinaryIO) -> Writer:
        """Create a writer over a binary stream owned by the caller."""
        writer = cls()
        writer._dest = stream
        writer._owned = False
        return writer

    def __enter__(self) -> Writer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Flush and release the destination if the writer owns it. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._dest.flush()
        if self._owned and not isinstance(self._dest, io.BytesIO):
            self._dest.close()

    def getvalue(self) -> str:
        """Return everything written so far to an in-memory writer."""
        if not isinstance(self._dest, io.BytesIO):
            raise InvalidArgumentError("Only in-memory writers hold their output")
        return self._dest.getvalue().decode("latin-1")

    def with_comma_as_decimal_separator(self) -> Writer:
        self._decimal_separator = ","
        return self

    def with_dot_as_decimal_separator(self) -> Writer:
        self._decimal_separator = "."
        return self

    def write_space(self) -> None:
        self._put(" ")

    def write_newline(self, with_cr: bool = False) -> None:
        self._put("\r\n" if with_cr else "\n")

    def write_char(self, ch: str) -> None:
        if len(ch) != 1:
            raise InvalidArgumentError(f"Expected a single character, got {ch!r}")
        self._put(ch)

    def write_string(self, text: str) -> None:
        self._put(text)

    def write_integer(self, value: int) -> None:
        self._put(str(value))

    def write_float(self, value: float, fixed_decimals: int | None = None) -> None:
        """Write *value* in positional notation, rounded to *fixed_decimals* places when given.

        Raises:
            InvalidArgumentError: If *value* is infinite or NaN, which the reader cannot parse.
        """
        if not math.isfinite(value):
            raise InvalidArgumentError(f"Cannot write non-finite value {value!r}")
        if fixed_decimals is None:
            text = format(Decimal(repr(float(value))), "f")
        else:
            text = f"{value:.{fixed_decimals}f}"
        self._put(text.replace(".", self._decimal_separator))

    def write_iter(self, values: Iterable[Any], separator: str = " ") -> None:
        """Write the elements of *values* separated by *separator*."""
        for i, value in enumerate(values):
            if i > 0:
                self.write_string(separator)
            self.write(value)

    def write_matrix(self, rows: Iterable[Iterable[Any]]) -> None:
        """Write one row per line, elements separated by single spaces."""
        for i, row in enumerate(rows):
            if i > 0:
                self.write_newline()
            self.write_iter(row)

    def write(self, value: Any) -> Writer:
        """Write *value* according to its type and return the writer for chaining.

        Strings are written verbatim, lists of lists as matrices, other
        iterables as space-separated rows.
        """
        if isinstance(value, str):
            self.write_string(value)
        elif isinstance(value, bool):
            self.write_integer(int(value))
        elif isinstance(value, int):
            self.write_integer(value)
        elif isinstance(value, float):
            self.write_float(value)
        elif isinstance(value, Iterable):
            items = list(value)
            if items and all(isinstance(item, Iterable) and not isinstance(item, str) for item in items):
                self.write_matrix(items)
            else:
                self.write_iter(items)
        else:
            self.write_string(str(value))
        return self

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _put(self, text: str) -> None:
        if self._closed:
            raise InvalidArgumentError("Writer is closed")
        self._dest.write(text.encode("latin-1"))
