"""Playwright driver module."""

from webdrive_runner.drivers.playwright.config import PlaywrightConfig
from webdrive_runner.drivers.playwright.driver import PlaywrightDriver
from webdrive_runner.drivers.playwright.manifest import (
    chromium_manifest,
    firefox_manifest,
    msedge_manifest,
    webkit_manifest,
)

__all__ = [
    "PlaywrightConfig",
    "PlaywrightDriver",
    "chromium_manifest",
    "firefox_manifest",
    "msedge_manifest",
    "webkit_manifest",
]
