# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Strict and lenient token reader for competitive-programming input files.

A :class:`Reader` turns the raw bytes of an input file into typed values and
raises a :class:`~cplib.diagnostics.CplibError` the moment the text departs
from the expected grammar. Two disciplines are supported:

* **strict** -- the next characters must immediately form the requested
  token. Whitespace is significant and must be consumed explicitly with
  :meth:`Reader.must_be_space` and :meth:`Reader.must_be_newline`.
* **lenient** -- insignificant characters are skipped before each read, then
  the token is parsed strictly.

Integers are always read into a fixed-width :class:`~cplib.io.kinds.IntKind`
and overflow is detected digit by digit, before the accumulator passes the
kind's limit.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from typing import Any, BinaryIO

from cplib.config.profile import ReaderOptions
from cplib.diagnostics import (
    EndOfInputError,
    FailedValidationError,
    IntegerOverflowError,
    InvalidArgumentError,
    RangeViolationError,
    UnexpectedCharacterError,
)
from cplib.io.kinds import LONG_LONG, CharKind, IntKind
from cplib.io.scanner import SourceCursor, is_digit, is_space

logger = logging.getLogger(__name__)

# A per-position character check: ``(index, char) -> accepted``.
CharPredicate = Callable[[int, str], bool]

# ###############
# Public Interface
# ###############


class Reader:
    """Reads typed tokens from a file, an in-memory buffer, or a borrowed stream.

    The lexical policy (``strict``, ``leading_zeros``, ``decimal_separator``)
    is mutable state that persists across reads. The fluent setters return the
    reader itself so they can be chained::

        reader = Reader("input.txt", strict=True).with_leading_zeros()

    The reader owns the stream it opened and must be closed, preferably by
    using it as a context manager.
    """

    def __init__(
        self,
        source: str | os.PathLike[str] | None = None,
        strict: bool = False,
        *,
        options: ReaderOptions | None = None,
    ) -> None:
        """Open *source* for reading, or read an empty buffer when *source* is None.

        Raises:
            OpenFailureError: If *source* cannot be opened.
        """
        cursor = SourceCursor.from_bytes(b"") if source is None else SourceCursor.open(source)
        self._init(cursor, strict, options)

    @classmethod
    def from_string(cls, data: bytes | str, strict: bool = False, *, options: ReaderOptions | None = None) -> Reader:
        """Create a reader over an in-memory buffer."""
        reader = cls.__new__(cls)
        reader._init(SourceCursor.from_bytes(data), strict, options)
        return reader

    @classmethod
    def from_stream(cls, stream: BinaryIO, strict: bool = False, *, options: ReaderOptions | None = None) -> Reader:
        """Create a reader over a binary stream owned by the caller.

        The stream is not closed when the reader is closed.
        """
        reader = cls.__new__(cls)
        reader._init(SourceCursor(stream, owned=False), strict, options)
        return reader

    def __enter__(self) -> Reader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying stream if the reader owns it. Idempotent."""
        self._cursor.close()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def leading_zeros(self) -> bool:
        return self._leading_zeros

    @property
    def decimal_separator(self) -> str:
        return self._decimal_separator

    @property
    def options(self) -> ReaderOptions:
        """Return the current lexical policy as an immutable snapshot."""
        return ReaderOptions(
            strict=self._strict,
            leading_zeros=self._leading_zeros,
            decimal_separator=self._decimal_separator,
        )

    def with_options(self, options: ReaderOptions) -> Reader:
        """Replace the whole lexical policy."""
        self._strict = options.strict
        self._leading_zeros = options.leading_zeros
        self._decimal_separator = options.decimal_separator
        logger.debug("Reader options set to %s", options)
        return self

    def with_string(self, data: bytes | str) -> Reader:
        """Swap the source for an in-memory buffer, closing the previous one."""
        self._cursor.close()
        self._cursor = SourceCursor.from_bytes(data)
        return self

    def make_strict(self) -> Reader:
        self._strict = True
        return self

    def make_non_strict(self) -> Reader:
        self._strict = False
        return self

    def with_leading_zeros(self) -> Reader:
        self._leading_zeros = True
        return self

    def without_leading_zeros(self) -> Reader:
        self._leading_zeros = False
        return self

    def with_comma_as_decimal_separator(self) -> Reader:
        self._decimal_separator = ","
        return self

    def with_dot_as_decimal_separator(self) -> Reader:
        self._decimal_separator = "."
        return self

    # ------------------------------------------------------------------
    # Positional assertions and skipping
    # ------------------------------------------------------------------

    def must_be_space(self) -> None:
        """Consume a single space character.

        Raises:
            UnexpectedCharacterError: If the next character is not ``' '``.
            EndOfInputError: If the input is exhausted.
        """
        if self._cursor.read_char() != " ":
            raise UnexpectedCharacterError(expected="space")

    def must_be_newline(self) -> None:
        """Consume a line terminator, either ``\\n`` or ``\\r\\n``.

        Raises:
            UnexpectedCharacterError: If no line terminator follows.
            EndOfInputError: If the input is exhausted.
        """
        ch = self._cursor.read_char()
        if ch == "\r":
            ch = self._cursor.read_char()
        if ch != "\n":
            raise UnexpectedCharacterError(expected="newline")

    def must_be_eof(self) -> None:
        """Assert that the whole input has been consumed.

        Raises:
            UnexpectedCharacterError: If characters remain.
        """
        if not self._cursor.at_end():
            raise UnexpectedCharacterError(expected="EOF")

    def skip_spaces(self) -> None:
        """Skip whitespace. Stops silently at end of input."""
        self._skip_while(is_space)

    def skip_non_numeric(self) -> None:
        """Skip everything up to the next digit or minus sign. Stops silently at end of input."""
        self._skip_while(lambda ch: not is_digit(ch) and ch != "-")

    # ------------------------------------------------------------------
    # Scalar reads
    # ------------------------------------------------------------------

    def read_char(self) -> str:
        """Consume and return the next character, whitespace included."""
        return self._cursor.read_char()

    def read_constant(self, token: str) -> str:
        """Consume exactly *token*.

        Raises:
            InvalidArgumentError: If *token* is empty.
            UnexpectedCharacterError: If the next ``len(token)`` characters differ.
            EndOfInputError: If fewer than ``len(token)`` characters remain.
        """
        if not token:
            raise InvalidArgumentError("Argument 'token' must not be the empty string")
        text = "".join(self._cursor.read_char() for _ in token)
        if text != token:
            raise UnexpectedCharacterError(expected=f"'{token}'")
        return text

    def read_any_of(self, tokens: Iterable[str]) -> str:
        """Read a whitespace-delimited word that must be one of *tokens*.

        Raises:
            InvalidArgumentError: If *tokens* is empty or contains an empty string.
            UnexpectedCharacterError: If the word is not a candidate.
        """
        candidates = list(tokens)
        if not candidates:
            raise InvalidArgumentError("Argument 'tokens' must not be empty")
        min_length = min(len(t) for t in candidates)
        max_length = max(len(t) for t in candidates)
        if min_length == 0:
            raise InvalidArgumentError("Elements of 'tokens' must not be the empty string")

        expected = "one of " + ", ".join(f"'{t}'" for t in candidates)
        try:
            word = self.read_string(min_length=min_length, max_length=max_length)
        except RangeViolationError:
            raise UnexpectedCharacterError(expected=expected) from None
        if word not in candidates:
            raise UnexpectedCharacterError(expected=expected)
        return word

    def read_integer(
        self,
        kind: IntKind = LONG_LONG,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        """Read an integer that must fit *kind*.

        When either bound is given, the value must also lie in
        ``[min_value, max_value]``; a missing bound defaults to the kind's limit.

        Raises:
            UnexpectedCharacterError: If the input does not start with an integer
                literal, or the literal has a forbidden leading zero.
            IntegerOverflowError: If the literal does not fit *kind*.
            EndOfInputError: If no digit could be read.
            RangeViolationError: If the value lies outside the bounds.
            InvalidArgumentError: If a bound does not fit *kind* or the interval is empty.
        """
        bounds = _resolve_bounds(kind, min_value, max_value)
        if not self._strict:
            self.skip_non_numeric()
        value = self._read_integer_strict(kind)
        if bounds is not None:
            _check_interval("n", value, *bounds)
        return value

    def read_float(self) -> float:
        """Read a decimal floating-point literal.

        The grammar is ``[-]digits[<separator>digits]``; exponents and the
        special values ``inf``/``nan`` are not recognised.

        Raises:
            UnexpectedCharacterError: On a malformed literal.
            EndOfInputError: If the input ends before a complete literal.
        """
        if not self._strict:
            self.skip_non_numeric()
        return self._read_float_strict()

    def read_string(
        self,
        allowed: str | CharPredicate | None = None,
        *,
        length: int | None = None,
        min_length: int = 0,
        max_length: int | None = None,
    ) -> str:
        """Read a whitespace-delimited word.

        Args:
            allowed: ``None`` to accept any non-space character, a string of
                permitted characters, or a predicate ``(index, char) -> bool``.
            length: Exact length; overrides *min_length* and *max_length*.
            min_length: Minimum length.
            max_length: Maximum length, or None for no limit.

        Raises:
            UnexpectedCharacterError: If a whitespace character comes first (strict mode).
            EndOfInputError: If the input is exhausted before the first character.
            FailedValidationError: If a character is rejected by *allowed*.
            RangeViolationError: If the length is out of bounds.
        """
        if length is not None:
            min_length = max_length = length
        _check_length_bounds(min_length, max_length)
        check = _char_predicate(allowed)
        if not self._strict:
            self.skip_spaces()
        return self._read_string_strict(check, min_length, max_length)

    # ------------------------------------------------------------------
    # Aggregate reads
    # ------------------------------------------------------------------

    def read_n_integers(
        self,
        n: int,
        kind: IntKind = LONG_LONG,
        min_value: int | None = None,
        max_value: int | None = None,
        sep: str = "",
    ) -> list[int]:
        """Read *n* integers, consuming *sep* between consecutive elements.

        With a separator every element is read strictly, so the separator is
        the only thing allowed between them.
        """
        bounds = _resolve_bounds(kind, min_value, max_value)
        if not sep:
            return self._read_n(n, lambda: self.read_integer(kind, min_value, max_value))

        def read_single() -> int:
            value = self._read_integer_strict(kind)
            if bounds is not None:
                _check_interval("x", value, *bounds)
            return value

        return self._read_n(n, read_single, sep)

    def read_n_floats(self, n: int, sep: str = "") -> list[float]:
        """Read *n* floating-point numbers, consuming *sep* between consecutive elements."""
        if not sep:
            return self._read_n(n, self.read_float)
        return self._read_n(n, self._read_float_strict, sep)

    def read_n_strings(self, n: int, length: int | None = None, sep: str = "") -> list[str]:
        """Read *n* words, optionally of a fixed *length*, consuming *sep* between them."""
        if not sep:
            return self._read_n(n, lambda: self.read_string(length=length))
        min_length = length if length is not None else 0
        _check_length_bounds(min_length, length)
        return self._read_n(n, lambda: self._read_string_strict(_accept_any, min_length, length), sep)

    def read_grid(self, kind: Any, n: int, m: int) -> list[list[Any]]:
        """Read an ``n x m`` grid: *n* rows of :meth:`read` ``(kind, m)`` separated by newlines."""
        return self._read_n(n, lambda: self.read(kind, m), "\n")

    def read(self, kind: Any, n: int | None = None, m: int | None = None) -> Any:
        """Read a value selected by *kind*.

        *kind* is an :class:`~cplib.io.kinds.IntKind`, the builtin ``int``
        (read as a 64-bit signed integer), ``float``, ``str`` or
        :data:`~cplib.io.kinds.CHAR`. With *n*, a row of *n* values is read,
        single-space separated in strict mode. With *n* and *m*, an ``n x m``
        grid is read.

        Raises:
            InvalidArgumentError: If *kind* is not supported or the dimensions
                are inconsistent.
        """
        if m is not None:
            if n is None:
                raise InvalidArgumentError("Both dimensions of the grid must be given")
            return self.read_grid(kind, n, m)
        if kind is int:
            kind = LONG_LONG
        if n is None:
            return self._read_scalar(kind)

        sep = " " if self._strict else ""
        if isinstance(kind, IntKind):
            return self.read_n_integers(n, kind, sep=sep)
        if kind is float:
            return self.read_n_floats(n, sep=sep)
        if kind is str:
            return self.read_n_strings(n, sep=sep)
        raise InvalidArgumentError(f"Cannot read a sequence of kind {kind!r}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _init(self, cursor: SourceCursor, strict: bool, options: ReaderOptions | None) -> None:
        self._cursor = cursor
        self._strict = strict
        self._leading_zeros = False
        self._decimal_separator = "."
        if options is not None:
            self.with_options(options)

    def _skip_while(self, skip: Callable[[str], bool]) -> None:
        try:
            while skip(self._cursor.read_char()):
                pass
        except EndOfInputError:
            return
        self._cursor.unread_one()

    def _read_scalar(self, kind: Any) -> Any:
        if isinstance(kind, CharKind):
            return self.read_char()
        if isinstance(kind, IntKind):
            return self.read_integer(kind)
        if kind is float:
            return self.read_float()
        if kind is str:
            return self.read_string()
        raise InvalidArgumentError(f"Cannot read a value of kind {kind!r}")

    def _read_n(self, n: int, read_single: Callable[[], Any], sep: str = "") -> list[Any]:
        if n <= 0:
            raise InvalidArgumentError("n must be strictly positive")
        if not self._strict:
            self.skip_spaces()
        values = []
        for i in range(n):
            values.append(read_single())
            if sep and i + 1 < n:
                self.read_constant(sep)
        return values

    def _read_integer_strict(self, kind: IntKind) -> int:
        if kind.signed:
            return self._read_signed_strict(kind)
        return self._read_unsigned_strict(kind.max_value)

    def _read_unsigned_strict(self, limit: int) -> int:
        """Read digits into a value no larger than *limit*.

        The overflow check happens before each accumulation step, so the
        accumulator never exceeds *limit*.
        """
        n = 0
        started = False
        while True:
            try:
                ch = self._cursor.read_char()
            except EndOfInputError:
                if not started:
                    raise
                return n
            if not is_digit(ch):
                if not started:
                    raise UnexpectedCharacterError(ch)
                self._cursor.unread_one()
                return n
            # A literal that began with '0' may not continue.
            if started and n == 0 and not self._leading_zeros:
                raise UnexpectedCharacterError("0")
            started = True
            digit = ord(ch) - ord("0")
            if n > (limit - digit) // 10:
                raise IntegerOverflowError(limit)
            n = 10 * n + digit

    def _read_signed_strict(self, kind: IntKind) -> int:
        ch = self._cursor.read_char()
        negative = ch == "-"
        if not negative:
            if not is_digit(ch):
                raise UnexpectedCharacterError(ch)
            self._cursor.unread_one()

        magnitude = self._read_unsigned_strict(kind.unsigned_counterpart.max_value)
        limit = -kind.min_value if negative else kind.max_value
        if magnitude > limit:
            raise IntegerOverflowError(limit)
        return -magnitude if negative else magnitude

    def _read_float_strict(self) -> float:
        separator = self._decimal_separator
        literal = ""
        integer_part_is_zero = True
        after_separator = False
        while True:
            try:
                ch = self._cursor.read_char()
            except EndOfInputError:
                if not literal or not is_digit(literal[-1]):
                    raise
                break

            if not is_digit(ch) and ch != "-" and ch != separator:
                # The literal may only end right after a digit.
                if not literal or not is_digit(literal[-1]):
                    raise UnexpectedCharacterError(ch)
                self._cursor.unread_one()
                break
            if ch == "-":
                if literal:
                    raise UnexpectedCharacterError("-")
                literal = "-"
                continue
            if ch == separator:
                if literal in ("", "-") or after_separator:
                    raise UnexpectedCharacterError(separator)
                after_separator = True
                literal += "."
                continue
            if integer_part_is_zero and not self._leading_zeros and not after_separator and literal not in ("", "-"):
                raise UnexpectedCharacterError("0")
            if ch != "0":
                integer_part_is_zero = False
            literal += ch

        return float(literal)

    def _read_string_strict(self, check: CharPredicate, min_length: int, max_length: int | None) -> str:
        chars: list[str] = []
        while True:
            try:
                ch = self._cursor.read_char()
            except EndOfInputError:
                if not chars:
                    raise
                break
            if is_space(ch):
                if not chars:
                    raise UnexpectedCharacterError(expected="non-space character")
                self._cursor.unread_one()
                break
            if max_length is not None and len(chars) >= max_length:
                raise RangeViolationError.interval("len(string)", min_length, max_length)
            if not check(len(chars), ch):
                raise FailedValidationError(f"Invalid character {ch!r} at position {len(chars)}")
            chars.append(ch)

        if len(chars) < min_length:
            raise RangeViolationError.interval("len(string)", min_length, _bound_text(max_length))
        return "".join(chars)


# ################
# Implementation
# ################


def _accept_any(index: int, ch: str) -> bool:
    return True


def _char_predicate(allowed: str | CharPredicate | None) -> CharPredicate:
    """Normalize the *allowed* argument of :meth:`Reader.read_string`."""
    if allowed is None:
        return _accept_any
    if isinstance(allowed, str):
        permitted = frozenset(allowed)
        return lambda index, ch: ch in permitted
    return allowed


def _bound_text(bound: int | None) -> str:
    return "inf" if bound is None else str(bound)


def _check_length_bounds(min_length: int, max_length: int | None) -> None:
    if min_length < 0:
        raise InvalidArgumentError("Minimum length must not be negative")
    if max_length is not None and (max_length <= 0 or max_length < min_length):
        raise InvalidArgumentError(f"Invalid length bounds [{min_length}, {max_length}]")


def _resolve_bounds(kind: IntKind, min_value: int | None, max_value: int | None) -> tuple[int, int] | None:
    """Return the interval to enforce, or None when no bound was requested."""
    if min_value is None and max_value is None:
        return None
    for bound in (min_value, max_value):
        if bound is not None and bound not in kind:
            raise InvalidArgumentError(f"Bound {bound} does not fit {kind.name}")
    low = kind.min_value if min_value is None else min_value
    high = kind.max_value if max_value is None else max_value
    if low > high:
        raise InvalidArgumentError(f"Empty interval [{low}, {high}]")
    return low, high


def _check_interval(name: str, value: int, low: int, high: int) -> None:
    if value < low or value > high:
        raise RangeViolationError.interval(name, low, high)
