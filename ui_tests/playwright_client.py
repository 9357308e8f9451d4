"""
Direct Playwright client for the storefront scenarios.

Usage:
    async with PlaywrightClient(base_url="http://localhost:5173") as client:
        await install_mock_routes(client.context, MockPizzaService.storefront())
        await client.page.goto("/")
"""
from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

logger = logging.getLogger(__name__)


class PlaywrightClient:
    """
    Launches a browser with one isolated context and page.

    Every client gets its own BrowserContext, so cookies, local storage and
    installed routes never leak between scenarios.
    """

    def __init__(
        self,
        browser_type: str = "chromium",
        headless: bool = True,
        timeout: int = 10000,
        base_url: Optional[str] = None,
    ):
        """
        Args:
            browser_type: Browser to use (chromium, firefox, webkit)
            headless: Run in headless mode
            timeout: Default timeout in milliseconds
            base_url: Storefront address that relative `goto` paths resolve against
        """
        self.browser_type = browser_type
        self.headless = headless
        self.timeout = timeout
        self.base_url = base_url

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def connect(self):
        """Launch the browser and open the default context and page."""
        self._playwright = await async_playwright().start()

        if self.browser_type == 'firefox':
            self._browser = await self._playwright.firefox.launch(headless=self.headless)
        elif self.browser_type == 'webkit':
            self._browser = await self._playwright.webkit.launch(headless=self.headless)
        else:
            self._browser = await self._playwright.chromium.launch(headless=self.headless)

        if self.base_url:
            self._context = await self._browser.new_context(base_url=self.base_url)
        else:
            self._context = await self._browser.new_context()
        self._context.set_default_timeout(self.timeout)

        self._page = await self._context.new_page()
        logger.debug("Launched %s (headless=%s)", self.browser_type, self.headless)

    async def close(self):
        """Close all connections and cleanup resources."""
        if self._page:
            await self._page.close()
            self._page = None

        if self._context:
            await self._context.close()
            self._context = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def context(self) -> BrowserContext:
        if not self._context:
            raise RuntimeError("Client not connected")
        return self._context

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Client not connected or page not created")
        return self._page
