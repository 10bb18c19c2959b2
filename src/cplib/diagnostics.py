# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostic values and the exception hierarchy that carries them.

Every error raised by the reader or the validation helpers exposes a
:class:`Diagnostic`, an immutable kind + message pair that can be rendered
for the user without holding on to the reader that produced it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class DiagnosticKind(enum.Enum):
    """All kinds of diagnostics produced by cplib."""

    OPEN_FAILURE = "open_failure"
    END_OF_INPUT = "end_of_input"
    UNEXPECTED_CHARACTER = "unexpected_character"
    OVERFLOW = "overflow"
    RANGE_VIOLATION = "range_violation"
    INVALID_ARGUMENT = "invalid_argument"
    VALIDATION_FAILURE = "validation_failure"

    @property
    def prefix(self) -> str:
        """Return the header used when rendering a diagnostic of this kind."""
        return _PREFIXES[self]


@dataclass(frozen=True)
class Diagnostic:
    """A structured error report.

    Attributes:
        kind: The category of the failure.
        message: Human-readable description without the kind prefix.
    """

    kind: DiagnosticKind
    message: str

    def render(self) -> str:
        """Return the message prefixed with the kind header."""
        return f"{self.kind.prefix}: {self.message}"


class CplibError(Exception):
    """Base class for every error raised by cplib.

    Attributes:
        diagnostic: The structured report for this error.
    """

    kind: DiagnosticKind = DiagnosticKind.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.diagnostic = Diagnostic(self.kind, message)

    @property
    def message(self) -> str:
        return self.diagnostic.message


class InvalidArgumentError(CplibError):
    """Raised when an API is misused, e.g. an empty literal token or a zero-length read."""

    kind = DiagnosticKind.INVALID_ARGUMENT


class FailedValidationError(CplibError):
    """Raised when a well-formed value violates a constraint.

    Attributes:
        location: ``(file, line)`` of the assertion that raised the error, when
            it was raised through :func:`cplib.validation.assert_valid`.
        reported: Whether the failure has already been printed to the user.
    """

    kind = DiagnosticKind.VALIDATION_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.location: tuple[str, int] | None = None
        self.reported = False

    def what_with_line(self, file: str, line: int) -> str:
        """Return the report block printed for a failed assertion at *file*:*line*."""
        return f"FAILED VALIDATION AT {file}::{line}\n---\n{self.message}\n---"


class RangeViolationError(FailedValidationError):
    """Raised when a syntactically valid token lies outside its allowed interval."""

    kind = DiagnosticKind.RANGE_VIOLATION

    @classmethod
    def interval(cls, name: str, low: object, high: object) -> RangeViolationError:
        """Build the error for ``low <= name <= high`` not holding."""
        return cls(f"Expected {low} <= {name} <= {high}")


class ReadError(CplibError):
    """Base class for errors raised while scanning the input."""


class OpenFailureError(ReadError):
    """Raised when an input or output file cannot be opened.

    Attributes:
        path: The path that could not be opened.
    """

    kind = DiagnosticKind.OPEN_FAILURE

    def __init__(self, path: str) -> None:
        super().__init__(f"Couldn't open {path}")
        self.path = path


class EndOfInputError(ReadError):
    """Raised when a read needs more characters than the source holds."""

    kind = DiagnosticKind.END_OF_INPUT

    def __init__(self) -> None:
        super().__init__("Reached EOF")


class UnexpectedCharacterError(ReadError):
    """Raised when the input does not match the expected token.

    Attributes:
        character: The offending character, if the error was raised for one.
        expected: Description of the expected token, if the error was raised for one.
    """

    kind = DiagnosticKind.UNEXPECTED_CHARACTER

    def __init__(self, character: str | None = None, *, expected: str | None = None) -> None:
        if expected is not None:
            super().__init__(f"Expected {expected}")
        else:
            super().__init__(f"Encountered character {character!r}")
        self.character = character
        self.expected = expected


class IntegerOverflowError(ReadError):
    """Raised when an integer literal does not fit its target kind.

    Attributes:
        limit: The largest magnitude accepted for the literal.
    """

    kind = DiagnosticKind.OVERFLOW

    def __init__(self, limit: int) -> None:
        super().__init__(f"Exceeded limit {limit}")
        self.limit = limit


# ################
# Implementation
# ################

_PREFIXES: dict[DiagnosticKind, str] = {
    DiagnosticKind.OPEN_FAILURE: "OPEN FAILURE",
    DiagnosticKind.END_OF_INPUT: "END OF INPUT",
    DiagnosticKind.UNEXPECTED_CHARACTER: "UNEXPECTED READ",
    DiagnosticKind.OVERFLOW: "INTEGER OVERFLOW",
    DiagnosticKind.RANGE_VIOLATION: "FAILED VALIDATION",
    DiagnosticKind.INVALID_ARGUMENT: "INVALID ARGUMENT",
    DiagnosticKind.VALIDATION_FAILURE: "FAILED VALIDATION",
}
