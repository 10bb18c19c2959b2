# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the validation predicates."""

import itertools
import random

import pytest

from cplib.validation import (
    all_between,
    all_of,
    between,
    distinct,
    eq,
    gt,
    gte,
    is_sorted,
    lt,
    lte,
    neq,
)

# ###############
# Comparisons
# ###############


class TestComparisons:
    def test_eq(self) -> None:
        assert eq(3, 3).message == "Elements are equal"
        assert eq(3, 4).failed
        assert eq(3, 4).message == "Elements are not equal: 3 != 4"

    def test_neq(self) -> None:
        assert neq(1, 2).message == "Elements are unequal"
        assert neq("a", "a").message == 'Elements are not unequal: "a" == "a"'

    @pytest.mark.parametrize(
        ("func", "a", "b", "passed", "failure"),
        [
            (lt, 1, 2, True, None),
            (lt, 2, 2, False, "Comparison failed: 2 >= 2"),
            (lte, 2, 2, True, None),
            (lte, 3, 2, False, "Comparison failed: 3 > 2"),
            (gt, 3, 2, True, None),
            (gt, 2, 2, False, "Comparison failed: 2 <= 2"),
            (gte, 2, 2, True, None),
            (gte, 1, 2, False, "Comparison failed: 1 < 2"),
        ],
    )
    def test_ordering(self, func, a: int, b: int, passed: bool, failure: str | None) -> None:
        result = func(a, b)
        assert result.passed is passed
        assert result.message == ("Comparison satisfied" if passed else failure)

    def test_works_for_any_ordered_type(self) -> None:
        assert lt("abc", "abd").passed
        assert gte((1, 2), (1, 1)).passed


class TestBetween:
    def test_inside(self) -> None:
        result = between(5, 1, 10)
        assert result.passed
        assert result.message == "Value (x = 5) lies in [1, 10]"

    def test_bounds_are_inclusive(self) -> None:
        assert between(1, 1, 10).passed
        assert between(10, 1, 10).passed

    def test_below(self) -> None:
        assert between(0, 1, 10).message == "Value does not lie in [1, 10]: 0 < 1"

    def test_above(self) -> None:
        assert between(11, 1, 10).message == "Value does not lie in [1, 10]: 11 > 10"


# ###############
# Sequences
# ###############


class TestAllOf:
    def test_all_pass(self) -> None:
        result = all_of([1, 2, 3], lambda x: gt(x, 0))
        assert result.passed
        assert result.message == "Property satisfied by all elements"

    def test_empty_sequence_passes(self) -> None:
        assert all_of([], lambda x: gt(x, 0)).passed

    def test_reports_first_failure(self) -> None:
        result = all_of([1, -2, -3], lambda x: gt(x, 0))
        assert result.message == "Failed check for element 1: Comparison failed: -2 <= 0"

    def test_stops_at_first_failure(self) -> None:
        seen: list[int] = []

        def check(x: int):
            seen.append(x)
            return lt(x, 3)

        all_of([1, 5, 2, 7], check)
        assert seen == [1, 5]

    def test_failure_index_matches_first_failing_element(self) -> None:
        rng = random.Random(7)
        for _ in range(100):
            values = [rng.randint(0, 9) for _ in range(rng.randint(0, 12))]
            result = all_of(values, lambda x: lt(x, 8))
            bad = [i for i, x in enumerate(values) if x >= 8]
            if bad:
                assert result.message.startswith(f"Failed check for element {bad[0]}:")
            else:
                assert result.passed

    def test_stateful_predicate_over_neighbours(self) -> None:
        values = [3, 1, 4, 4, 5]
        pairs = list(zip(values, values[1:]))
        result = all_of(pairs, lambda pair: neq(*pair))
        assert result.message == "Failed check for element 2: Elements are not unequal: 4 == 4"

    def test_all_between(self) -> None:
        assert all_between([0, 5, 9], 0, 9).passed
        assert all_between([0, 10, 9], 0, 9).message == (
            "Failed check for element 1: Value does not lie in [0, 9]: 10 > 9"
        )


class TestIsSorted:
    def test_strictly_increasing(self) -> None:
        assert is_sorted([1, 2, 3]).message == "Array is sorted"

    def test_equal_neighbours_fail_strict(self) -> None:
        result = is_sorted([1, 2, 2, 3])
        assert result.message == "Array is not sorted: Wrong order at positions 1 and 2"

    def test_equal_neighbours_pass_non_strict(self) -> None:
        assert is_sorted([1, 2, 2, 3], strict=False).passed

    def test_decreasing(self) -> None:
        assert is_sorted([3, 2, 1], decreasing=True).passed
        assert is_sorted([3, 3, 1], decreasing=True).failed
        assert is_sorted([3, 3, 1], strict=False, decreasing=True).passed
        assert is_sorted([1, 2], strict=False, decreasing=True).failed

    def test_short_sequences_are_sorted(self) -> None:
        assert is_sorted([]).passed
        assert is_sorted([42]).passed

    def test_custom_comparator(self) -> None:
        by_length = is_sorted(["a", "bb", "ccc"], compare=lambda a, b: len(a) < len(b))
        assert by_length.passed
        result = is_sorted(["aa", "b"], compare=lambda a, b: len(a) < len(b))
        assert result.message == "Array is not sorted: Wrong order at positions 0 and 1"

    @pytest.mark.parametrize(("strict", "decreasing"), list(itertools.product([True, False], repeat=2)))
    def test_matches_adjacent_pair_definition(self, strict: bool, decreasing: bool) -> None:
        rng = random.Random(int(strict) * 2 + int(decreasing))
        for _ in range(200):
            values = [rng.randint(0, 4) for _ in range(rng.randint(2, 6))]

            def in_order(a: int, b: int) -> bool:
                if decreasing:
                    a, b = b, a
                return a < b if strict else a <= b

            violations = [i for i in range(len(values) - 1) if not in_order(values[i], values[i + 1])]
            result = is_sorted(values, strict=strict, decreasing=decreasing)
            if violations:
                i = violations[0]
                assert result.message == f"Array is not sorted: Wrong order at positions {i} and {i + 1}"
            else:
                assert result.passed


class TestDistinct:
    def test_distinct(self) -> None:
        assert distinct([3, 1, 2]).message == "Elements are distinct"

    def test_reports_duplicate(self) -> None:
        assert distinct([5, 3, 5, 1]).message == "Elements are not distinct: Multiple occurrences of 5"

    def test_reports_smallest_duplicate(self) -> None:
        assert distinct([9, 2, 9, 2]).message == "Elements are not distinct: Multiple occurrences of 2"

    def test_strings_are_quoted(self) -> None:
        assert distinct(["b", "a", "b"]).message == 'Elements are not distinct: Multiple occurrences of "b"'

    def test_empty_and_single(self) -> None:
        assert distinct([]).passed
        assert distinct([1]).passed

    def test_does_not_modify_input(self) -> None:
        values = [3, 1, 2]
        distinct(values)
        assert values == [3, 1, 2]

    def test_matches_set_semantics(self) -> None:
        rng = random.Random(11)
        for _ in range(200):
            values = [rng.randint(0, 20) for _ in range(rng.randint(0, 8))]
            assert distinct(values).passed is (len(set(values)) == len(values))
