# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input validator for OII 2023 "bastioni"."""

import sys

from cplib import Reader, run_validator
from cplib.io import INT

MIN_N = 1
MAX_N = 300_000


def validate(r: Reader) -> None:
    r.make_strict()

    n = r.read_integer(INT, MIN_N, MAX_N)
    r.must_be_newline()

    # Exactly n characters, each one of = # < >.
    r.read_string("=#<>", length=n)
    r.must_be_newline()

    r.must_be_eof()


if __name__ == "__main__":
    sys.exit(run_validator(validate))
