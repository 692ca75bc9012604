"""Headless driver issuing plain HTTP requests."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from webdrive_runner.drivers.base import BrowserDriver
from webdrive_runner.drivers.http.config import HttpDriverConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpDriver(BrowserDriver):
    """Driver that loads pages without rendering them.

    Enough for tests executed by the server while it handles the request.
    """

    config: HttpDriverConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: HttpDriverConfig
    ) -> AsyncGenerator["HttpDriver", None]:
        """Create driver with managed session lifecycle."""
        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=config.timeout),
            headers={"User-Agent": config.user_agent},
        ) as session:
            yield cls(name="http", config=config, session=session)

    async def navigate(self, url: str) -> None:
        """Request ``url`` and read the whole response."""
        log.debug("GET %s", url)
        async with self.session.get(url) as response:
            await response.read()
            if response.status >= 400:
                log.warning("GET %s returned %d", url, response.status)
