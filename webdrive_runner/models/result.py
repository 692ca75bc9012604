"""Models for test execution results."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias

TestStatus: TypeAlias = Literal["passed", "failed", "error"]


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Result of a single test execution."""

    __test__ = False

    test_id: str
    status: TestStatus
    duration: float


@dataclass(frozen=True, kw_only=True)
class RunOutcome:
    """Results of running a sequence of tests against one backend."""

    backend_name: str
    results: Sequence[TestResult]

    @property
    def statuses(self) -> Mapping[str, TestStatus]:
        """Status per test id."""
        return {result.test_id: result.status for result in self.results}

    @property
    def durations(self) -> Mapping[str, float]:
        """Elapsed seconds per test id."""
        return {result.test_id: result.duration for result in self.results}

    @property
    def ok(self) -> bool:
        """True if every test passed (trivially true for an empty run)."""
        return all(result.status == "passed" for result in self.results)
