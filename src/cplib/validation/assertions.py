# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Call-site assertion for validation results."""

from __future__ import annotations

import inspect
import sys

from cplib.validation.result import ValidationResult

# ###############
# Public Interface
# ###############


def assert_valid(result: ValidationResult) -> ValidationResult:
    """Abort validation if *result* failed.

    On failure the file and line of the caller are printed to stderr together
    with the full nested message, and a
    :class:`~cplib.diagnostics.FailedValidationError` recording that location
    is raised. A successful result is returned unchanged.

    Raises:
        FailedValidationError: If *result* is a failure.
    """
    if result.passed:
        return result

    file, line = _caller_location()
    error = result.to_error()
    error.location = (file, line)
    print(error.what_with_line(file, line), file=sys.stderr)
    error.reported = True
    raise error


# ################
# Implementation
# ################


def _caller_location() -> tuple[str, int]:
    """Return ``(file, line)`` of the frame that called :func:`assert_valid`."""
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
        if caller is None:
            return "<unknown>", 0
        return caller.f_code.co_filename, caller.f_lineno
    finally:
        del frame
