"""
Browser-backed producers.

Site scrapers subclass BrowserProducer and implement `collect(page)`. The base
class owns the Playwright lifecycle so every scraper launches, identifies and
shuts down its browser the same way.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from fake_useragent import FakeUserAgentError, UserAgent
from playwright.async_api import Page, async_playwright

from harvest.core.models import RawJob
from harvest.producers.base import ProducerOptions

logger = logging.getLogger(__name__)

# Sent when fake-useragent cannot load its browser data.
FALLBACK_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]

VIEWPORT = {"width": 1920, "height": 1080}


class BrowserProducer(ABC):
    """
    Abstract base class for producers that drive a real browser.
    """

    name: str = ""

    # Built on first use and shared by every producer in the process.
    _agents: Optional[UserAgent] = None

    def __init__(self):
        if not self.name:
            self.name = type(self).__name__

    @classmethod
    def user_agent(cls) -> str:
        """Random desktop user agent, or FALLBACK_UA when none can be loaded."""
        if BrowserProducer._agents is None:
            try:
                BrowserProducer._agents = UserAgent(
                    browsers=["chrome", "firefox", "safari"],
                    os=["windows", "macos"],
                    fallback=FALLBACK_UA,
                )
            except FakeUserAgentError as e:
                logger.warning(f"User agent data unavailable, using fallback: {e}")
                return FALLBACK_UA
        return BrowserProducer._agents.random

    @abstractmethod
    async def collect(self, page: Page) -> List[Union[RawJob, Dict[str, Any]]]:
        """
        Navigate the site with the given page and return its job records.
        """
        pass

    async def __call__(self, options: ProducerOptions) -> List[Union[RawJob, Dict[str, Any]]]:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(
                headless=options.headless,
                args=LAUNCH_ARGS,
            )
            logger.info(f"[{self.name}] Browser launched (Headless: {options.headless}).")
            try:
                user_agent = self.user_agent()
                logger.debug(f"[{self.name}] Using User Agent: {user_agent}")
                context = await browser.new_context(
                    user_agent=user_agent,
                    viewport=VIEWPORT if options.headless else None,
                    locale="en-US",
                )
                page = await context.new_page()
                jobs = await self.collect(page)
                logger.info(f"[{self.name}] Collected {len(jobs)} jobs.")
                return jobs
            finally:
                await browser.close()
                logger.info(f"[{self.name}] Browser closed.")
