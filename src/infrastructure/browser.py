"""Headless browser fetcher for rendered problem pages."""

from typing import Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from domain.exceptions import FetchError
from infrastructure.settings import Settings, get_settings

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class BrowserFetcher:
    """Loads a page in headless Chromium and returns its rendered HTML."""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize fetcher.

        Args:
            settings: Browser options; defaults to environment settings
        """
        self.settings = settings or get_settings()

    async def get_rendered_html(self, url: str) -> str:
        """
        Open url in a fresh browser and return the DOM once its content has loaded.

        The browser is launched per call and always closed before returning.

        Raises:
            FetchError: If the browser fails to launch or load the page
        """
        logger.debug(f"Fetching rendered page: {url}")

        async with async_playwright() as playwright:
            try:
                browser = await playwright.chromium.launch(
                    headless=self.settings.browser_headless,
                    args=BROWSER_ARGS,
                )
            except PlaywrightError as e:
                raise FetchError(f"Failed to launch browser: {e}") from e

            try:
                page = await browser.new_page()
                await page.set_extra_http_headers(
                    {"User-Agent": self.settings.browser_user_agent}
                )
                await page.goto(
                    url,
                    wait_until="domcontentloaded",
                    timeout=self.settings.page_load_timeout_ms,
                )
                html = await page.content()
            except PlaywrightError as e:
                raise FetchError(f"Failed to load {url}: {e}") from e
            finally:
                await browser.close()
                logger.debug("Browser closed")

        logger.debug(f"Fetched {len(html)} characters from {url}")
        return html
