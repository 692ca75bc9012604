"""CLI entry point for the webdrive test runner."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from typing import Any

import aiohttp

from webdrive_runner.catalog import CatalogUnavailableError, load_catalog
from webdrive_runner.drivers.loading import (
    UnknownDriverError,
    load_driver_manifest,
    resolve_drivers,
)
from webdrive_runner.models.catalog import display_name
from webdrive_runner.orchestrator import RunOrchestrator, RunSummary
from webdrive_runner.sequencer import format_duration

DEFAULT_APP_URL = "http://localhost:9000"
DEFAULT_DRIVER = "http"
CATALOG_TIMEOUT = 60.0

STATUS_SYMBOLS = {
    "passed": "✓",
    "failed": "✗",
    "error": "?",
}


def log_results_summary(log: logging.Logger, summary: RunSummary) -> None:
    """Log a formatted summary of test results per driver."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for outcome in summary.outcomes:
        log.info("%s: %s", outcome.backend_name, "ok" if outcome.ok else "FAILED")
        for result in outcome.results:
            log.info(
                "  %s %s: %s (%s)",
                STATUS_SYMBOLS.get(result.status, "?"),
                display_name(result.test_id),
                result.status,
                format_duration(result.duration),
            )

    log.info("Overall result: %s", summary.sentinel)


def format_output(summary: RunSummary) -> dict[str, Any]:
    """Format run results for JSON output."""
    all_results: list[dict[str, Any]] = []
    for outcome in summary.outcomes:
        for result in outcome.results:
            all_results.append(
                {
                    "driver": outcome.backend_name,
                    "test": result.test_id,
                    "status": result.status,
                    "duration": result.duration,
                }
            )

    return {
        "total": len(all_results),
        "passed": sum(1 for r in all_results if r["status"] == "passed"),
        "failed": sum(1 for r in all_results if r["status"] == "failed"),
        "errors": sum(1 for r in all_results if r["status"] == "error"),
        "result": summary.sentinel,
        "results": all_results,
    }


def parse_driver_config(driver_config_json: str) -> Mapping[str, Mapping[str, Any]]:
    """Parse per-driver configuration overrides keyed by driver name."""
    if not driver_config_json.strip():
        return {}
    config = json.loads(driver_config_json)
    if not isinstance(config, dict) or not all(
        isinstance(value, dict) for value in config.values()
    ):
        raise ValueError("Driver configuration must map driver names to objects")
    return config


async def run(
    app_url: str,
    drivers: str | None,
    default_driver: str = DEFAULT_DRIVER,
    driver_config: Mapping[str, Mapping[str, Any]] | None = None,
) -> int:
    """Run the test catalog of the application and return exit code.

    The overall test outcome is reported through the sentinel file; the exit
    code is non-zero only when the run could not be carried out.
    """
    log = logging.getLogger("webdrive_runner")
    app_url = app_url.rstrip("/")

    try:
        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=CATALOG_TIMEOUT)
        ) as session:
            catalog = await load_catalog(session, app_url)
    except CatalogUnavailableError as e:
        log.error("The application does not start. There are errors: %s", e)
        return 1

    try:
        default_manifest = load_driver_manifest(default_driver)
        manifests = resolve_drivers(drivers)
    except UnknownDriverError as e:
        log.error("%s", e)
        return 1

    log.info(
        "Drivers: %s (default: %s)",
        ", ".join(m.name for m in manifests) or "none",
        default_manifest.name,
    )

    orchestrator = RunOrchestrator(
        app_url=app_url,
        default_driver=default_manifest,
        driver_overrides=driver_config or {},
    )
    summary = await orchestrator.run(catalog, manifests)

    log_results_summary(log, summary)
    print(json.dumps(format_output(summary), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser, with defaults taken from the environment."""
    parser = argparse.ArgumentParser(
        description="Run Play framework tests through browser drivers"
    )
    parser.add_argument(
        "--app-url",
        default=os.environ.get("APPLICATION_URL", DEFAULT_APP_URL),
        help="URL of the application under test",
    )
    parser.add_argument(
        "--drivers",
        default=os.environ.get("WEBDRIVE_DRIVERS", ""),
        help="Comma-separated drivers for HTML suites (http, chromium, firefox, ...)",
    )
    parser.add_argument(
        "--default-driver",
        default=os.environ.get("WEBDRIVE_DEFAULT_DRIVER", DEFAULT_DRIVER),
        help="Driver running server-side tests",
    )
    parser.add_argument(
        "--driver-config",
        default=os.environ.get("WEBDRIVE_DRIVER_CONFIG", "{}"),
        help='JSON configuration per driver, e.g. {"firefox": {"headless": false}}',
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        driver_config = parse_driver_config(args.driver_config)
    except ValueError as e:
        parser.error(f"invalid --driver-config: {e}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            app_url=args.app_url,
            drivers=args.drivers,
            default_driver=args.default_driver,
            driver_config=driver_config,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
