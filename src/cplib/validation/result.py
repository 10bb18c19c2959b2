# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Pass/fail values with nestable, human-readable messages."""

from __future__ import annotations

from dataclasses import dataclass

from cplib.diagnostics import Diagnostic, DiagnosticKind, FailedValidationError

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationResult:
    """The outcome of a constraint check.

    A result is a success carrying a description of what held, or a failure
    carrying a :class:`~cplib.diagnostics.Diagnostic`. Results combine with
    ``~`` (NOT), ``&`` (AND) and ``|`` (OR); the combined message embeds both
    operand messages, indented one level, so the full reasoning is preserved.

    Note that the plain ``and``/``or`` keywords short-circuit on ``bool(result)``
    and return one of the operands unchanged; use ``&``/``|`` to build a
    combined diagnostic.

    Attributes:
        message: The success message or the failure message.
        failure: The failure diagnostic, or None for a success.
    """

    message: str
    failure: Diagnostic | None = None

    @classmethod
    def success(cls, message: str) -> ValidationResult:
        return cls(message)

    @classmethod
    def failed_with(cls, message: str) -> ValidationResult:
        return cls(message, Diagnostic(DiagnosticKind.VALIDATION_FAILURE, message))

    @property
    def passed(self) -> bool:
        return self.failure is None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def to_error(self) -> FailedValidationError:
        """Return the exception that reports this failure.

        Raises:
            ValueError: If the result is a success.
        """
        if self.failure is None:
            raise ValueError("A successful result has no failure to report")
        return FailedValidationError(self.failure.message)

    def __bool__(self) -> bool:
        return self.passed

    def __invert__(self) -> ValidationResult:
        return not_(self)

    def __and__(self, other: ValidationResult) -> ValidationResult:
        return and_(self, other)

    def __or__(self, other: ValidationResult) -> ValidationResult:
        return or_(self, other)


def indent(text: str) -> str:
    """Indent every line of *text* by one level (two spaces)."""
    return _INDENT + text.replace("\n", "\n" + _INDENT)


def not_(result: ValidationResult) -> ValidationResult:
    """Flip *result*, nesting its message under a ``NOT`` header."""
    message = "NOT\n" + indent(result.message)
    if result.passed:
        return ValidationResult.failed_with(message)
    return ValidationResult.success(message)


def and_(a: ValidationResult, b: ValidationResult) -> ValidationResult:
    """Succeed iff both operands succeed; both messages are kept."""
    message = indent(a.message) + "\nAND\n" + indent(b.message)
    if a.passed and b.passed:
        return ValidationResult.success(message)
    return ValidationResult.failed_with(message)


def or_(a: ValidationResult, b: ValidationResult) -> ValidationResult:
    """Succeed iff at least one operand succeeds; both messages are kept."""
    message = indent(a.message) + "\nOR\n" + indent(b.message)
    if a.passed or b.passed:
        return ValidationResult.success(message)
    return ValidationResult.failed_with(message)


# ################
# Implementation
# ################

_INDENT = "  "
