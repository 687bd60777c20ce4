import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from .errors import NavigationFailure
from .platforms import PlatformConfig

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Loads a platform's listing page in a fresh headless Chromium and returns its HTML.

    A browser is launched per call and closed on every exit path. Navigation
    failures are fatal for the call; the post-scroll readiness wait is not.
    """

    def __init__(self, timeout_ms: int = 60000, settle_timeout_ms: int = 3000, headless: bool = True):
        self.timeout_ms = timeout_ms
        self.settle_timeout_ms = settle_timeout_ms
        self.headless = headless

    async def fetch_html(self, platform: PlatformConfig) -> str:
        profile = platform.profile
        async with async_playwright() as pw:
            browser = await pw.chromium.launch(headless=self.headless)
            try:
                ctx = await browser.new_context(**profile.context_options())
                if profile.cookies:
                    await ctx.add_cookies([dict(c) for c in profile.cookies])
                page = await ctx.new_page()

                try:
                    await page.goto(platform.url, wait_until="domcontentloaded", timeout=self.timeout_ms)
                except (PlaywrightTimeoutError, PlaywrightError) as e:
                    raise NavigationFailure(platform.url, str(e)) from e

                # one viewport of scrolling triggers the lazy-loaded cards
                await page.evaluate("() => window.scrollBy(0, window.innerHeight)")
                await self._wait_until_ready(page, platform.item_selector)

                return await page.content()
            finally:
                await browser.close()

    async def _wait_until_ready(self, page, item_selector: str) -> None:
        try:
            await page.wait_for_selector(item_selector, state="attached", timeout=self.settle_timeout_ms)
            await page.wait_for_load_state("networkidle", timeout=self.settle_timeout_ms)
        except PlaywrightTimeoutError:
            logger.warning("Page not settled after %d ms, extracting what is loaded", self.settle_timeout_ms)
