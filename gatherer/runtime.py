from __future__ import annotations

import logging

from playwright.async_api import async_playwright

from gatherer.config import GathererConfig
from gatherer.drivers.cdp import PlaywrightDriver
from gatherer.event_listeners import EventListenersGatherer, PassContext
from shared.schemas import Artifact

logger = logging.getLogger("event_listener_gatherer.runtime")


async def run_pass(url: str, config: GathererConfig) -> Artifact:
    """Load url once in Chromium with the gatherer bracketing the navigation."""
    gatherer = EventListenersGatherer(config)
    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=config.headless, args=["--disable-dev-shm-usage"])
        try:
            page = await browser.new_page()
            driver = await PlaywrightDriver.for_page(page)
            context = PassContext(driver=driver, url=url)
            await gatherer.before_pass(context)
            try:
                await page.goto(
                    url,
                    wait_until=config.wait_until,
                    timeout=config.navigation_timeout_seconds * 1000,
                )
            except Exception:
                logger.exception("navigation to %s failed", url)
            await gatherer.after_pass(context)
        finally:
            await browser.close()

    artifact = gatherer.artifact
    if artifact is None:
        raise RuntimeError("pass finished without committing an artifact")
    return artifact
