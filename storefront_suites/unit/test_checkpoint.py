import re

import pytest

from storefront_suites.ui_testing.framework.checkpoint import (
    CheckKind,
    CheckpointError,
    CheckpointRecorder,
)


def test_passing_checkpoints_are_recorded():
    checks = CheckpointRecorder()

    checks.regex_match("account URL", "https://shop/customer/account/", r"/customer/account/")
    checks.contains("contact", "John Doe\njohn@example.com", "John Doe")
    checks.equal("cart count", 2, 2)
    checks.greater_than("listing", 12, 0)
    checks.is_true("added", True)
    checks.is_false("rejected", False)

    assert [r.passed for r in checks.results] == [True] * 6
    assert checks.summary() == "6/6 checkpoints passed"


def test_failure_raises_assertion_error_with_both_sides():
    checks = CheckpointRecorder()

    with pytest.raises(CheckpointError) as exc_info:
        checks.equal("cart count", 1, 2)

    error = exc_info.value
    assert isinstance(error, AssertionError)
    assert "cart count" in str(error)
    assert "expected equal 2" in str(error)
    assert "observed 1" in str(error)
    assert error.result.passed is False
    assert checks.results[-1] is error.result


def test_compiled_pattern_is_reported_as_text():
    checks = CheckpointRecorder()

    with pytest.raises(CheckpointError) as exc_info:
        checks.regex_match("account URL", "https://shop/login", re.compile(r"/customer/account/"))

    assert exc_info.value.result.expected == "/customer/account/"


def test_is_true_rejects_truthy_non_bool():
    checks = CheckpointRecorder()

    with pytest.raises(CheckpointError):
        checks.check("flag", CheckKind.IS_TRUE, "yes")


def test_incomparable_values_fail_instead_of_erroring():
    checks = CheckpointRecorder()

    with pytest.raises(CheckpointError):
        checks.contains("contact", None, "John Doe")
