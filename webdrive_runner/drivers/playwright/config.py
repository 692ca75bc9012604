"""Configuration for Playwright drivers."""

from collections.abc import Sequence

from pydantic import BaseModel, Field


class PlaywrightConfig(BaseModel):
    """Configuration shared by all Playwright browsers."""

    headless: bool = True
    navigation_timeout_ms: float = 30_000
    launch_args: Sequence[str] = Field(default_factory=list)
