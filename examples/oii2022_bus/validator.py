# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input validator for OII 2022 "bus"."""

import sys

from cplib import Reader, run_validator
from cplib.io import INT
from cplib.validation import all_between, all_of, assert_valid, between, lte, neq

MIN_N = 2
MAX_N = 100_000
MIN_L = 1
MAX_L = 100_000
MIN_K = 2
MAX_SUM_K = 300_000


def validate(r: Reader) -> None:
    r.make_strict()

    n = r.read(INT)
    assert_valid(between(n, MIN_N, MAX_N))
    r.must_be_space()

    lines = r.read(INT)
    assert_valid(between(lines, MIN_L, MAX_L))
    r.must_be_newline()

    sum_k = 0
    for _ in range(lines):
        # K >= MIN_K is checked while reading and reported as a range violation.
        k = r.read_integer(INT, MIN_K)
        sum_k += k
        r.must_be_space()

        stops = r.read(INT, k)
        assert_valid(all_between(stops, 0, n - 1))
        assert_valid(all_of(zip(stops, stops[1:]), lambda pair: neq(*pair)))
        r.must_be_newline()

    assert_valid(lte(sum_k, MAX_SUM_K))
    r.must_be_eof()


if __name__ == "__main__":
    sys.exit(run_validator(validate))
