# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token reader and validation toolkit for competitive-programming input files."""

from cplib.diagnostics import (
    CplibError,
    Diagnostic,
    DiagnosticKind,
    EndOfInputError,
    FailedValidationError,
    IntegerOverflowError,
    InvalidArgumentError,
    OpenFailureError,
    RangeViolationError,
    ReadError,
    UnexpectedCharacterError,
)
from cplib.harness import run_validator
from cplib.io import Reader, Writer

__all__ = [
    "CplibError",
    "Diagnostic",
    "DiagnosticKind",
    "EndOfInputError",
    "FailedValidationError",
    "IntegerOverflowError",
    "InvalidArgumentError",
    "OpenFailureError",
    "RangeViolationError",
    "ReadError",
    "Reader",
    "UnexpectedCharacterError",
    "Writer",
    "run_validator",
]
