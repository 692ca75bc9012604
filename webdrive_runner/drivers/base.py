"""Abstract base class for browser automation backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class BrowserDriver(ABC):
    """A live browser session able to load URLs.

    Sessions are created and released by the async context manager returned
    from a driver manifest's factory; leaving the context terminates the
    browser.
    """

    name: str

    @abstractmethod
    async def navigate(self, url: str) -> None:
        """Load ``url`` and wait for the page to finish loading.

        Args:
            url: Absolute URL to load

        """
