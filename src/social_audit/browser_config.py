"""
Browser configuration for Playwright-based page rendering.

This module provides a validated Pydantic configuration model for the browser
used to render pages before their meta tags are extracted.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class BrowserConfig(BaseModel):
    """
    Configuration for the Playwright browser session.

    All fields are validated by Pydantic to ensure type safety and valid values.
    """

    headless: bool = Field(
        default=True,
        description="Run browser in headless mode (no visible UI)"
    )

    browser_type: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium",
        description="Browser engine to use for rendering"
    )

    timeout: int = Field(
        default=30000,
        description="Page load timeout in milliseconds",
        ge=1000,
        le=300000
    )

    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = Field(
        default="load",
        description="When to consider navigation complete"
    )

    user_agent: Optional[str] = Field(
        default=None,
        description="Custom user agent. None uses the browser default."
    )

    launch_args: List[str] = Field(
        default_factory=list,
        description="Additional browser launch arguments (e.g., '--disable-http2')"
    )


# Default instance used when no config is given
DEFAULT_CONFIG = BrowserConfig()
