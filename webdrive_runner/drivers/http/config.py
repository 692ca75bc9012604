"""Configuration for the HTTP driver."""

from pydantic import BaseModel


class HttpDriverConfig(BaseModel):
    """Configuration for the HTTP driver.

    Server-side tests run while the trigger request is being served, so the
    timeout must cover the slowest test.
    """

    timeout: float = 600.0
    user_agent: str = "webdrive-runner"
