"""Driver manifest definition for the plugin system."""

from collections.abc import Callable, Mapping
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from webdrive_runner.drivers.base import BrowserDriver

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class DriverManifest(Generic[ConfigT]):
    """Manifest describing a browser driver plugin.

    The manifest references the configuration class and the factory opening a
    driver session, so drivers are only imported when selected. A non-empty
    ``platforms`` restricts the driver to the matching ``sys.platform`` values.
    """

    name: str
    config_cls: type[ConfigT]
    driver_factory: Callable[[ConfigT], AbstractAsyncContextManager[BrowserDriver]]
    platforms: frozenset[str] = field(default_factory=frozenset)

    def supports_platform(self, platform: str) -> bool:
        """Return True if the driver can run on ``platform``."""
        if not self.platforms:
            return True
        return any(platform.startswith(prefix) for prefix in self.platforms)

    def open(
        self, overrides: Mapping[str, Any] | None = None
    ) -> AbstractAsyncContextManager[BrowserDriver]:
        """Build the driver configuration and return the session context."""
        config = self.config_cls.model_validate(dict(overrides or {}))
        return self.driver_factory(config)
