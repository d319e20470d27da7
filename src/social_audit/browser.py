"""
Playwright session that renders pages for the social sharing audit.

    async with BrowserSession(config) as session:
        async with session.page("https://example.com") as page:
            ...

Navigation errors are not caught: a page that fails to load produces no
audit results.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from .browser_config import BrowserConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class BrowserNotStartedError(RuntimeError):
    """Raised when a page is requested outside the session context manager."""


class BrowserSession:
    """Owns one Playwright browser; each page gets its own isolated context."""

    def __init__(self, config: Optional[BrowserConfig] = None):
        """
        Initialize the browser session.

        Args:
            config: BrowserConfig instance with browser settings
        """
        self._config = config or DEFAULT_CONFIG
        self._playwright = None
        self._browser = None

        logger.debug(f"BrowserSession initialized with config: {self._config}")

    async def __aenter__(self) -> "BrowserSession":
        """Enter async context manager, launching browser."""
        from playwright.async_api import async_playwright

        logger.info(f"Launching {self._config.browser_type} browser (headless={self._config.headless})")

        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, self._config.browser_type)

        launch_options = {"headless": self._config.headless}
        if self._config.launch_args:
            launch_options["args"] = self._config.launch_args

        self._browser = await browser_launcher.launch(**launch_options)

        logger.info("Browser launched successfully")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager, closing browser."""
        if self._browser:
            logger.info("Closing browser")
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @asynccontextmanager
    async def page(self, url: str) -> AsyncIterator:
        """
        Open ``url`` in a fresh browser context and yield the loaded page.

        Raises:
            BrowserNotStartedError: If the session has not been entered
            playwright.async_api.Error: If navigation fails
        """
        if not self._browser:
            raise BrowserNotStartedError(
                "Browser is not running. Use BrowserSession as an async context manager: "
                "async with BrowserSession(config) as session:"
            )

        context_options = {}
        if self._config.user_agent:
            context_options["user_agent"] = self._config.user_agent

        context = await self._browser.new_context(**context_options)
        try:
            page = await context.new_page()
            logger.info(f"Loading: {url}")
            await page.goto(
                url,
                wait_until=self._config.wait_until,
                timeout=self._config.timeout
            )
            yield page
        finally:
            # Always close context to ensure isolation
            await context.close()
