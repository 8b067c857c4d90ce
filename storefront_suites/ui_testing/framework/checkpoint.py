"""
================================================================================
Checkpoints
================================================================================

Assertion boundary for scenario orchestration.

A checkpoint compares one observed value (URL, text, count, flag) against an
expected value. Passing checkpoints are recorded; a failing one raises
CheckpointError with both sides of the comparison and attaches them to the
Allure report, which aborts the rest of the scenario.

Author: Automation Team
License: MIT
================================================================================
"""

import json
import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Pattern, Union

import allure
from loguru import logger


class CheckKind(str, Enum):
    """Supported comparisons."""
    EQUAL = "equal"
    CONTAINS = "contains"
    REGEX_MATCH = "regex_match"
    GREATER_THAN = "greater_than"
    IS_TRUE = "is_true"
    IS_FALSE = "is_false"


@dataclass
class CheckpointResult:
    """Outcome of one checkpoint."""
    name: str
    kind: str
    expected: Any
    observed: Any
    passed: bool

    @property
    def message(self) -> str:
        verdict = "passed" if self.passed else "FAILED"
        return (
            f"Checkpoint '{self.name}' {verdict}: "
            f"expected {self.kind} {self.expected!r}, observed {self.observed!r}"
        )


class CheckpointError(AssertionError):
    """Raised when a scenario expectation is violated."""

    def __init__(self, result: CheckpointResult):
        super().__init__(result.message)
        self.result = result


def _regex_match(observed: Any, expected: Union[str, Pattern[str]]) -> bool:
    pattern = expected if isinstance(expected, re.Pattern) else re.compile(expected)
    return bool(pattern.search(str(observed)))


_COMPARATORS: Dict[CheckKind, Callable[[Any, Any], bool]] = {
    CheckKind.EQUAL: lambda observed, expected: observed == expected,
    CheckKind.CONTAINS: lambda observed, expected: expected in observed,
    CheckKind.REGEX_MATCH: _regex_match,
    CheckKind.GREATER_THAN: lambda observed, expected: observed > expected,
    CheckKind.IS_TRUE: lambda observed, expected: observed is True,
    CheckKind.IS_FALSE: lambda observed, expected: observed is False,
}


class CheckpointRecorder:
    """
    Evaluates checkpoints and keeps the results of the ones that ran.

    Example:
        checks = CheckpointRecorder()
        checks.regex_match("account URL", page.url, r"/customer/account/$")
        checks.equal("cart count", count, before + 1)
    """

    def __init__(self):
        self.results: List[CheckpointResult] = []

    def check(self, name: str, kind: CheckKind, observed: Any, expected: Any = None) -> CheckpointResult:
        """
        Evaluate one checkpoint.

        Raises:
            CheckpointError: When the comparison does not hold
        """
        try:
            passed = _COMPARATORS[kind](observed, expected)
        except TypeError:
            passed = False

        expected_shown = expected.pattern if isinstance(expected, re.Pattern) else expected
        result = CheckpointResult(
            name=name,
            kind=kind.value,
            expected=expected_shown,
            observed=observed,
            passed=passed,
        )
        self.results.append(result)

        if passed:
            logger.info(result.message)
            return result

        logger.error(result.message)
        allure.attach(
            json.dumps(asdict(result), indent=2, default=str),
            name=f"Checkpoint failed: {name}",
            attachment_type=allure.attachment_type.JSON,
        )
        raise CheckpointError(result)

    def equal(self, name: str, observed: Any, expected: Any) -> CheckpointResult:
        return self.check(name, CheckKind.EQUAL, observed, expected)

    def contains(self, name: str, observed: Any, expected: Any) -> CheckpointResult:
        return self.check(name, CheckKind.CONTAINS, observed, expected)

    def regex_match(self, name: str, observed: Any, pattern: Union[str, Pattern[str]]) -> CheckpointResult:
        return self.check(name, CheckKind.REGEX_MATCH, observed, pattern)

    def greater_than(self, name: str, observed: Any, bound: Any) -> CheckpointResult:
        return self.check(name, CheckKind.GREATER_THAN, observed, bound)

    def is_true(self, name: str, observed: Any) -> CheckpointResult:
        return self.check(name, CheckKind.IS_TRUE, observed, True)

    def is_false(self, name: str, observed: Any) -> CheckpointResult:
        return self.check(name, CheckKind.IS_FALSE, observed, False)

    def summary(self) -> str:
        passed = sum(1 for r in self.results if r.passed)
        return f"{passed}/{len(self.results)} checkpoints passed"


__all__ = [
    "CheckKind",
    "CheckpointError",
    "CheckpointRecorder",
    "CheckpointResult",
]
