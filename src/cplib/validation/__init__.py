# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation results, predicates and the assertion helper."""

from cplib.validation.assertions import assert_valid
from cplib.validation.predicates import (
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
from cplib.validation.result import ValidationResult, and_, indent, not_, or_

__all__ = [
    "ValidationResult",
    "all_between",
    "all_of",
    "and_",
    "assert_valid",
    "between",
    "distinct",
    "eq",
    "gt",
    "gte",
    "indent",
    "is_sorted",
    "lt",
    "lte",
    "neq",
    "not_",
    "or_",
]
