"""Load the list of tests from the application under test."""

import logging
from pathlib import Path

import aiohttp

from webdrive_runner.models.catalog import TestCatalog, is_automation_test

log = logging.getLogger(__name__)

CATALOG_MARKER = "---"
CATALOG_PATH = "/@tests.list"


class CatalogUnavailableError(Exception):
    """Raised when the test list cannot be fetched or parsed."""


def parse_catalog(text: str) -> TestCatalog:
    """Parse the body of the ``@tests.list`` endpoint.

    The first line is a protocol marker, the second the result directory,
    the third the URL of the HTML suite runner; every following line names
    one test.

    Raises:
        CatalogUnavailableError: If the marker or the header lines are missing

    """
    lines = text.splitlines()
    if not lines or lines[0] != CATALOG_MARKER:
        raise CatalogUnavailableError("Error retrieving list of tests")
    if len(lines) < 3:
        raise CatalogUnavailableError("Test list is missing its header lines")

    result_root = Path(lines[1].strip())
    if not lines[1].strip() or not result_root.is_absolute():
        raise CatalogUnavailableError(
            f"Result directory must be an absolute path, got {lines[1]!r}"
        )
    trigger_url_fragment = lines[2].strip()
    if not trigger_url_fragment:
        raise CatalogUnavailableError("Test list has no suite runner URL")

    automation_tests: list[str] = []
    class_tests: list[str] = []
    for line in lines[3:]:
        test_id = line.strip()
        if not test_id:
            continue
        tests = automation_tests if is_automation_test(test_id) else class_tests
        if test_id in tests:
            log.warning("Ignoring duplicate test %s", test_id)
            continue
        tests.append(test_id)

    return TestCatalog(
        result_root=result_root,
        trigger_url_fragment=trigger_url_fragment,
        automation_tests=tuple(automation_tests),
        class_tests=tuple(class_tests),
    )


async def load_catalog(session: aiohttp.ClientSession, app_url: str) -> TestCatalog:
    """Fetch and parse the test list of the application at ``app_url``.

    A single request is made; any failure is fatal to the run.
    """
    url = f"{app_url}{CATALOG_PATH}"
    log.info("Retrieving list of tests from %s", url)

    try:
        async with session.get(url) as response:
            if response.status != 200:
                text = await response.text()
                raise CatalogUnavailableError(
                    f"Failed to retrieve test list: {response.status} {text}"
                )
            body = await response.text(encoding="utf-8")
    except (aiohttp.ClientError, TimeoutError) as e:
        raise CatalogUnavailableError(f"Failed to retrieve test list: {e}") from e

    catalog = parse_catalog(body)
    log.info(
        "%d selenium test(s) and %d other test(s) to run",
        len(catalog.automation_tests),
        len(catalog.class_tests),
    )
    return catalog
