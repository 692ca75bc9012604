"""Playwright driver manifests."""

from webdrive_runner.drivers.manifest import DriverManifest
from webdrive_runner.drivers.playwright.config import PlaywrightConfig
from webdrive_runner.drivers.playwright.driver import PlaywrightDriver

chromium_manifest = DriverManifest(
    name="chromium",
    config_cls=PlaywrightConfig,
    driver_factory=PlaywrightDriver.factory("chromium"),
)

firefox_manifest = DriverManifest(
    name="firefox",
    config_cls=PlaywrightConfig,
    driver_factory=PlaywrightDriver.factory("firefox"),
)

webkit_manifest = DriverManifest(
    name="webkit",
    config_cls=PlaywrightConfig,
    driver_factory=PlaywrightDriver.factory("webkit"),
)

# Edge is only tested on Windows.
msedge_manifest = DriverManifest(
    name="msedge",
    config_cls=PlaywrightConfig,
    driver_factory=PlaywrightDriver.factory("chromium", channel="msedge"),
    platforms=frozenset({"win32"}),
)
