"""Playwright driver implementation."""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

from playwright.async_api import Page, async_playwright

from webdrive_runner.drivers.base import BrowserDriver
from webdrive_runner.drivers.playwright.config import PlaywrightConfig

log = logging.getLogger(__name__)

BrowserName: TypeAlias = Literal["chromium", "firefox", "webkit"]


@dataclass(frozen=True, kw_only=True)
class PlaywrightDriver(BrowserDriver):
    """Driver rendering pages in a real browser through Playwright."""

    page: Page = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls,
        config: PlaywrightConfig,
        *,
        browser_name: BrowserName,
        channel: str | None = None,
    ) -> AsyncGenerator["PlaywrightDriver", None]:
        """Launch the browser and close it when the context exits."""
        launch_options: dict[str, Any] = {
            "headless": config.headless,
            "args": list(config.launch_args),
        }
        if channel is not None:
            launch_options["channel"] = channel

        async with async_playwright() as playwright:
            browser_type = getattr(playwright, browser_name)
            log.info("Launching %s (channel=%s)", browser_name, channel)
            browser = await browser_type.launch(**launch_options)
            try:
                context = await browser.new_context()
                page = await context.new_page()
                page.set_default_navigation_timeout(config.navigation_timeout_ms)
                yield cls(name=channel or browser_name, page=page)
            finally:
                await browser.close()

    @classmethod
    def factory(
        cls, browser_name: BrowserName, channel: str | None = None
    ) -> Callable[[PlaywrightConfig], AbstractAsyncContextManager["PlaywrightDriver"]]:
        """Bind a browser to ``from_config`` for use in a manifest."""

        def _open(
            config: PlaywrightConfig,
        ) -> AbstractAsyncContextManager["PlaywrightDriver"]:
            return cls.from_config(config, browser_name=browser_name, channel=channel)

        return _open

    async def navigate(self, url: str) -> None:
        """Load ``url`` in the page."""
        log.debug("%s navigating to %s", self.name, url)
        response = await self.page.goto(url)
        if response is not None and not response.ok:
            log.warning("%s loaded %s with status %d", self.name, url, response.status)
