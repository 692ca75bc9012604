"""Loading of browser drivers from entry points."""

import logging
import sys
from collections.abc import Sequence
from importlib.metadata import entry_points
from typing import Any

from webdrive_runner.drivers.manifest import DriverManifest

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "webdrive_runner.drivers"


class UnknownDriverError(Exception):
    """Raised when a driver is not found."""


def load_driver_manifest(key: str) -> DriverManifest[Any]:
    """Load a driver manifest by key.

    Args:
        key: The driver key as registered in pyproject.toml
             (e.g., "http", "firefox")

    Returns:
        The driver manifest instance

    Raises:
        UnknownDriverError: If no driver with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: DriverManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise UnknownDriverError(
        f"Driver '{key}' not found. Available drivers: {available}"
    )


def parse_driver_list(value: str | None) -> Sequence[str]:
    """Parse comma-separated driver keys."""
    if value is None or not value.strip():
        return ()
    return tuple(key.strip() for key in value.split(",") if key.strip())


def resolve_drivers(
    value: str | None, platform: str = sys.platform
) -> Sequence[DriverManifest[Any]]:
    """Resolve configured driver keys into manifests, in configuration order.

    Drivers restricted to other platforms are skipped.

    Raises:
        UnknownDriverError: If any key cannot be resolved

    """
    manifests: list[DriverManifest[Any]] = []
    for key in parse_driver_list(value):
        manifest = load_driver_manifest(key)
        if not manifest.supports_platform(platform):
            log.info("Skipping driver %s: not supported on %s", key, platform)
            continue
        manifests.append(manifest)
    return manifests
