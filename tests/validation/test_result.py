# Copyright 2026 cplib Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for validation results and their logical combinators."""

import pytest

from cplib.diagnostics import DiagnosticKind, FailedValidationError
from cplib.validation import ValidationResult, and_, eq, indent, lt, neq, not_, or_

# ###############
# Test Helpers
# ###############

_OK = ValidationResult.success("ok")
_BAD = ValidationResult.failed_with("bad")


# ###############
# Result Values
# ###############


class TestValidationResult:
    def test_success(self) -> None:
        assert _OK.passed
        assert not _OK.failed
        assert _OK.failure is None
        assert bool(_OK)

    def test_failure(self) -> None:
        assert _BAD.failed
        assert not bool(_BAD)
        assert _BAD.failure is not None
        assert _BAD.failure.kind == DiagnosticKind.VALIDATION_FAILURE
        assert _BAD.failure.message == "bad"

    def test_values_compare_by_payload(self) -> None:
        assert ValidationResult.success("ok") == _OK
        assert ValidationResult.failed_with("ok") != _OK

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            _OK.message = "changed"  # type: ignore[misc]

    def test_to_error(self) -> None:
        error = _BAD.to_error()
        assert isinstance(error, FailedValidationError)
        assert error.message == "bad"

    def test_to_error_on_success(self) -> None:
        with pytest.raises(ValueError):
            _OK.to_error()


class TestIndent:
    def test_single_line(self) -> None:
        assert indent("x") == "  x"

    def test_every_line_is_indented(self) -> None:
        assert indent("a\nb\n  c") == "  a\n  b\n    c"


# ###############
# Combinators
# ###############


class TestNot:
    def test_not_of_success_fails(self) -> None:
        result = not_(eq(3, 3))
        assert result.failed
        assert result.message == "NOT\n  Elements are equal"

    def test_not_of_failure_succeeds(self) -> None:
        result = not_(_BAD)
        assert result.passed
        assert result.message == "NOT\n  bad"

    def test_operator_form(self) -> None:
        assert ~eq(3, 3) == not_(eq(3, 3))

    def test_double_negation_nests(self) -> None:
        assert (~~_OK).message == "NOT\n  NOT\n    ok"
        assert (~~_OK).passed


class TestAndOr:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [(_OK, _OK, True), (_OK, _BAD, False), (_BAD, _OK, False), (_BAD, _BAD, False)],
    )
    def test_and_truth_table(self, a: ValidationResult, b: ValidationResult, expected: bool) -> None:
        assert and_(a, b).passed is expected

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [(_OK, _OK, True), (_OK, _BAD, True), (_BAD, _OK, True), (_BAD, _BAD, False)],
    )
    def test_or_truth_table(self, a: ValidationResult, b: ValidationResult, expected: bool) -> None:
        assert or_(a, b).passed is expected

    def test_and_keeps_both_messages(self) -> None:
        assert and_(_BAD, _OK).message == "  bad\nAND\n  ok"

    def test_or_keeps_both_messages_even_on_success(self) -> None:
        assert or_(_OK, _BAD).message == "  ok\nOR\n  bad"

    def test_operator_forms(self) -> None:
        assert (_OK & _BAD) == and_(_OK, _BAD)
        assert (_OK | _BAD) == or_(_OK, _BAD)

    def test_nested_tree(self) -> None:
        result = (lt(1, 2) & neq(4, 4)) | ~eq(1, 2)
        assert result.passed
        assert result.message == (
            "    Comparison satisfied\n"
            "  AND\n"
            "    Elements are not unequal: 4 == 4\n"
            "OR\n"
            "  NOT\n"
            "    Elements are not equal: 1 != 2"
        )
