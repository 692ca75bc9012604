"""Run the whole test catalog across all configured drivers."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from webdrive_runner.drivers.manifest import DriverManifest
from webdrive_runner.models.catalog import TestCatalog
from webdrive_runner.models.result import RunOutcome
from webdrive_runner.sequencer import POLL_INTERVAL, TestSequencer

log = logging.getLogger(__name__)

PASSED_SENTINEL = "result.passed"
FAILED_SENTINEL = "result.failed"


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Outcomes of every driver run, in execution order."""

    outcomes: Sequence[RunOutcome]

    @property
    def failed(self) -> bool:
        """True if any driver run had a failing or missing result."""
        return any(not outcome.ok for outcome in self.outcomes)

    @property
    def sentinel(self) -> str:
        """Name of the file marking the overall result."""
        return FAILED_SENTINEL if self.failed else PASSED_SENTINEL


def write_sentinel(result_root: Path, failed: bool) -> Path:
    """Create the ``result.passed`` or ``result.failed`` marker file."""
    path = result_root / (FAILED_SENTINEL if failed else PASSED_SENTINEL)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return path


@dataclass(frozen=True, kw_only=True)
class RunOrchestrator:
    """Runs server-side tests on the default driver and HTML suites on all drivers.

    Drivers run one after another: the application keeps a single test state
    that only one session may drive at a time.
    """

    app_url: str
    default_driver: DriverManifest[Any]
    driver_overrides: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    poll_interval: float = POLL_INTERVAL

    async def run(
        self,
        catalog: TestCatalog,
        drivers: Sequence[DriverManifest[Any]],
    ) -> RunSummary:
        """Run every test of ``catalog`` and write the sentinel file."""
        sequencer = TestSequencer(
            app_url=self.app_url,
            catalog=catalog,
            poll_interval=self.poll_interval,
        )
        outcomes: list[RunOutcome] = []

        outcomes.append(
            await sequencer.run_backend(
                self.default_driver,
                catalog.class_tests,
                self.driver_overrides.get(self.default_driver.name),
            )
        )

        for manifest in drivers:
            outcomes.append(
                await sequencer.run_backend(
                    manifest,
                    catalog.automation_tests,
                    self.driver_overrides.get(manifest.name),
                )
            )

        summary = RunSummary(outcomes=outcomes)
        path = write_sentinel(catalog.result_root, summary.failed)
        log.info("Wrote %s", path)
        return summary
