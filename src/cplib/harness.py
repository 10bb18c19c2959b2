# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point helper for standalone validator scripts.

A validator is a callable taking a :class:`~cplib.io.reader.Reader`, the same
shape ``cplib validate`` expects. A script ends with::

    if __name__ == "__main__":
        sys.exit(run_validator(validate))
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from cplib.config.profile import ReaderOptions
from cplib.diagnostics import CplibError, FailedValidationError
from cplib.io.reader import Reader

# ###############
# Public Interface
# ###############


def run_validator(
    validate: Callable[[Reader], object],
    argv: Sequence[str] | None = None,
    *,
    options: ReaderOptions | None = None,
) -> int:
    """Open the input file named by ``argv[1]`` and run *validate* on it.

    Args:
        validate: Callable receiving the opened reader. It signals a rejected
            input by raising a :class:`~cplib.diagnostics.CplibError`.
        argv: Command line, defaults to :data:`sys.argv`.
        options: Initial lexical policy of the reader.

    Returns:
        0 if the input is valid, 1 if it was rejected, 2 on a usage error.
    """
    args = list(sys.argv if argv is None else argv)
    if len(args) < 2:
        prog = args[0] if args else "validator"
        print(f"Usage: {prog} INPUT_FILE", file=sys.stderr)
        return 2

    try:
        with Reader(args[1], options=options) as reader:
            validate(reader)
    except CplibError as exc:
        if not (isinstance(exc, FailedValidationError) and exc.reported):
            print(exc.diagnostic.render(), file=sys.stderr)
        return 1
    return 0
