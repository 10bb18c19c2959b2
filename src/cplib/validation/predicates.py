# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Comparison, membership, ordering and distinctness checks.

Every function returns a :class:`~cplib.validation.result.ValidationResult`
instead of raising, so checks can be combined before being asserted.
Sequence checks stop at the first violation and report its position.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from cplib.validation.result import ValidationResult

# ###############
# Public Interface
# ###############


def eq(a: Any, b: Any) -> ValidationResult:
    if a == b:
        return ValidationResult.success("Elements are equal")
    return ValidationResult.failed_with(f"Elements are not equal: {_show(a)} != {_show(b)}")


def neq(a: Any, b: Any) -> ValidationResult:
    if not a == b:
        return ValidationResult.success("Elements are unequal")
    return ValidationResult.failed_with(f"Elements are not unequal: {_show(a)} == {_show(b)}")


def lt(a: Any, b: Any) -> ValidationResult:
    if a < b:
        return ValidationResult.success("Comparison satisfied")
    return ValidationResult.failed_with(f"Comparison failed: {_show(a)} >= {_show(b)}")


def lte(a: Any, b: Any) -> ValidationResult:
    if not b < a:
        return ValidationResult.success("Comparison satisfied")
    return ValidationResult.failed_with(f"Comparison failed: {_show(a)} > {_show(b)}")


def gt(a: Any, b: Any) -> ValidationResult:
    if b < a:
        return ValidationResult.success("Comparison satisfied")
    return ValidationResult.failed_with(f"Comparison failed: {_show(a)} <= {_show(b)}")


def gte(a: Any, b: Any) -> ValidationResult:
    if not a < b:
        return ValidationResult.success("Comparison satisfied")
    return ValidationResult.failed_with(f"Comparison failed: {_show(a)} < {_show(b)}")


def between(x: Any, low: Any, high: Any) -> ValidationResult:
    """Check ``low <= x <= high``."""
    interval = f"[{_show(low)}, {_show(high)}]"
    if x < low:
        return ValidationResult.failed_with(f"Value does not lie in {interval}: {_show(x)} < {_show(low)}")
    if high < x:
        return ValidationResult.failed_with(f"Value does not lie in {interval}: {_show(x)} > {_show(high)}")
    return ValidationResult.success(f"Value (x = {_show(x)}) lies in {interval}")


def all_of(values: Iterable[Any], predicate: Callable[[Any], ValidationResult]) -> ValidationResult:
    """Apply *predicate* to each element, stopping at the first failure.

    The failure message names the zero-based index of the failing element and
    nests the predicate's own message.
    """
    for index, value in enumerate(values):
        result = predicate(value)
        if result.failed:
            return ValidationResult.failed_with(f"Failed check for element {index}: {result.message}")
    return ValidationResult.success("Property satisfied by all elements")


def all_between(values: Iterable[Any], low: Any, high: Any) -> ValidationResult:
    """Check that every element lies in ``[low, high]``."""
    return all_of(values, lambda x: between(x, low, high))


def is_sorted(
    values: Sequence[Any],
    strict: bool = True,
    decreasing: bool = False,
    *,
    compare: Callable[[Any, Any], bool] | None = None,
) -> ValidationResult:
    """Check that every adjacent pair is in order.

    By default the sequence must be strictly increasing. *strict* allows
    equal neighbours when False, *decreasing* reverses the direction. A
    custom *compare* ``(left, right) -> in_order`` replaces both flags.
    """
    if compare is None:
        compare = _ordering(strict, decreasing)
    for pos in range(len(values) - 1):
        if not compare(values[pos], values[pos + 1]):
            return ValidationResult.failed_with(
                f"Array is not sorted: Wrong order at positions {pos} and {pos + 1}"
            )
    return ValidationResult.success("Array is sorted")


def distinct(values: Iterable[Any]) -> ValidationResult:
    """Check that no two elements are equal.

    The elements are sorted, so they must be totally ordered. The smallest
    repeated value is reported.
    """
    ordered = sorted(values)
    for left, right in zip(ordered, ordered[1:]):
        if left == right:
            return ValidationResult.failed_with(
                f"Elements are not distinct: Multiple occurrences of {_show(left)}"
            )
    return ValidationResult.success("Elements are distinct")


# ################
# Implementation
# ################


def _show(value: Any) -> str:
    """Render an operand for a message; strings are quoted."""
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def _ordering(strict: bool, decreasing: bool) -> Callable[[Any, Any], bool]:
    if decreasing:
        if strict:
            return lambda a, b: b < a
        return lambda a, b: not a < b
    if strict:
        return lambda a, b: a < b
    return lambda a, b: not b < a
