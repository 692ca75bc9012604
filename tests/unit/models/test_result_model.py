"""Tests for run outcome model."""

from webdrive_runner.models.result import RunOutcome, TestResult
from webdrive_runner.testing.factories import RunOutcomeFactory, TestResultFactory


def test_empty_outcome_is_ok() -> None:
    """A run without tests counts as passed."""
    assert RunOutcomeFactory.build(results=[]).ok is True


def test_outcome_with_only_passed_tests_is_ok() -> None:
    """All passed results make the run ok."""
    outcome = RunOutcomeFactory.build(
        results=[TestResultFactory.build(), TestResultFactory.build()]
    )

    assert outcome.ok is True


def test_failed_or_error_result_makes_outcome_not_ok() -> None:
    """Any non-passed result makes the run not ok."""
    for status in ("failed", "error"):
        outcome = RunOutcomeFactory.build(
            results=[TestResultFactory.build(), TestResultFactory.build(status=status)]
        )
        assert outcome.ok is False


def test_statuses_and_durations_by_test_id() -> None:
    """Exposes per-test status and duration mappings."""
    outcome = RunOutcome(
        backend_name="http",
        results=[
            TestResult(test_id="A.class", status="passed", duration=1.5),
            TestResult(test_id="B.class", status="error", duration=4.0),
        ],
    )

    assert outcome.statuses == {"A.class": "passed", "B.class": "error"}
    assert outcome.durations == {"A.class": 1.5, "B.class": 4.0}
