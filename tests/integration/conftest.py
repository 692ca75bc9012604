"""Fixtures for integration tests."""

from collections.abc import AsyncGenerator

import pytest
from aiohttp.test_utils import TestServer

from webdrive_runner.testing.play_app import PlayApplication, ServeFn


@pytest.fixture
async def serve() -> AsyncGenerator[ServeFn, None]:
    """Return a function serving a PlayApplication on a local port."""
    servers: list[TestServer] = []

    async def _serve(application: PlayApplication) -> str:
        server = TestServer(application.build())
        await server.start_server()
        servers.append(server)
        return f"http://{server.host}:{server.port}"

    yield _serve

    for server in servers:
        await server.close()
