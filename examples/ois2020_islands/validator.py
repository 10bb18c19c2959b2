# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input validator for OIS 2020 "islands"."""

import sys

from cplib import Reader, run_validator
from cplib.io import INT, UINT16
from cplib.validation import all_between, all_of, assert_valid

MIN_RC = 1
MAX_RC = 1000


def validate(r: Reader) -> None:
    r.make_strict()

    rows = r.read_integer(INT, MIN_RC, MAX_RC)
    r.must_be_space()
    cols = r.read_integer(INT, MIN_RC, MAX_RC)
    r.must_be_newline()

    grid = r.read(UINT16, rows, cols)
    assert_valid(all_of(grid, lambda row: all_between(row, 0, 1)))

    r.must_be_newline()
    r.must_be_eof()


if __name__ == "__main__":
    sys.exit(run_validator(validate))
