"""Run a sequence of tests against a single browser driver."""

import asyncio
import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from webdrive_runner.archiver import archive_results
from webdrive_runner.drivers.base import BrowserDriver
from webdrive_runner.drivers.manifest import DriverManifest
from webdrive_runner.models.catalog import (
    TestCatalog,
    display_name,
    is_automation_test,
    legacy_result_basename,
    result_basename,
)
from webdrive_runner.models.result import RunOutcome, TestResult, TestStatus

log = logging.getLogger(__name__)

POLL_ATTEMPTS = 5
POLL_INTERVAL = 1.0

STATUS_LABELS: Mapping[TestStatus, str] = {
    "passed": "PASSED     ",
    "failed": "FAILED  !  ",
    "error": "ERROR   ?  ",
}


def result_markers(
    result_root: Path, test_id: str
) -> tuple[Sequence[Path], Sequence[Path]]:
    """Return the passed and failed marker paths a test may produce."""
    basenames = dict.fromkeys(
        [result_basename(test_id), legacy_result_basename(test_id)]
    )
    passed = [result_root / f"{name}.passed.html" for name in basenames]
    failed = [result_root / f"{name}.failed.html" for name in basenames]
    return passed, failed


async def poll_result(
    result_root: Path,
    test_id: str,
    attempts: int = POLL_ATTEMPTS,
    poll_interval: float = POLL_INTERVAL,
) -> TestStatus:
    """Wait for the application to write the result marker of a test.

    Checks for the passed marker, then the failed marker, up to ``attempts``
    times, sleeping ``poll_interval`` between checks but not after the last.

    Returns:
        "passed" or "failed" for the first marker found, "error" if none
        appeared

    """
    passed_markers, failed_markers = result_markers(result_root, test_id)

    for attempt in range(1, attempts + 1):
        if any(path.exists() for path in passed_markers):
            return "passed"
        if any(path.exists() for path in failed_markers):
            return "failed"
        if attempt < attempts:
            await asyncio.sleep(poll_interval)

    log.debug("No result for %s after %d check(s)", test_id, attempts)
    return "error"


def format_duration(seconds: float) -> str:
    """Format a duration as ``"{m} min {s}s"`` or ``"{s}s"``."""
    minutes, secs = divmod(int(seconds), 60)
    if minutes > 0:
        return f"{minutes % 60} min {secs}s"
    return f"{secs}s"


@dataclass(frozen=True, kw_only=True)
class TestSequencer:
    """Runs catalog tests, one driver session at a time."""

    __test__ = False

    app_url: str
    catalog: TestCatalog
    poll_interval: float = POLL_INTERVAL

    def init_url(self) -> str:
        """URL resetting the application's test state."""
        return f"{self.app_url}/@tests/init"

    def end_url(self, ok: bool) -> str:
        """URL reporting the end of a driver run."""
        return f"{self.app_url}/@tests/end?result={'passed' if ok else 'failed'}"

    def trigger_url(self, test_id: str) -> str:
        """URL starting a single test."""
        if not is_automation_test(test_id):
            return f"{self.app_url}/@tests/{test_id}"
        return (
            f"{self.app_url}{self.catalog.trigger_url_fragment}"
            f"?baseUrl={self.app_url}&test=/@tests/{test_id}.suite"
            f"&auto=true&resultsUrl=/@tests/{test_id}"
        )

    async def run_backend(
        self,
        manifest: DriverManifest[Any],
        tests: Sequence[str],
        overrides: Mapping[str, Any] | None = None,
    ) -> RunOutcome:
        """Run ``tests`` in order on a new session of the given driver.

        The session is released before the results are archived, whatever
        happens while the tests run. Errors opening or closing the session
        propagate.
        """
        log.info("Starting tests with %s", manifest.name)
        results: list[TestResult] = []

        async with manifest.open(overrides) as driver:
            await driver.navigate(self.init_url())
            for test_id in tests:
                results.append(await self._run_test(driver, test_id))

            outcome = RunOutcome(backend_name=manifest.name, results=results)
            await driver.navigate(self.end_url(outcome.ok))

        archive_results(self.catalog.result_root, manifest.name)
        return outcome

    async def _run_test(self, driver: BrowserDriver, test_id: str) -> TestResult:
        name = display_name(test_id)
        start = time.monotonic()

        await driver.navigate(self.trigger_url(test_id))
        status = await poll_result(
            self.catalog.result_root, test_id, poll_interval=self.poll_interval
        )

        duration = time.monotonic() - start
        log.info(
            "%s... %s%s",
            name.ljust(self.catalog.name_width),
            STATUS_LABELS[status],
            format_duration(duration),
        )
        return TestResult(test_id=test_id, status=status, duration=duration)
