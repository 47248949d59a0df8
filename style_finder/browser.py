"""
Playwright capture: load a page and materialize its StyleSnapshot.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Browser, Route, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config import LOAD_STATE_TIMEOUT_MS, ScrapeConfig
from .errors import CaptureError
from .gradients import GRADIENT_PROPS
from .palette import COLOR_PROPS
from .snapshot import SNAPSHOT_SCRIPT, StyleSnapshot
from .typography import TYPOGRAPHY_PROPS

logger = logging.getLogger(__name__)

SNAPSHOT_PROPS = list(dict.fromkeys(COLOR_PROPS + TYPOGRAPHY_PROPS + GRADIENT_PROPS))

# Stylesheets are never blocked: computed styles depend on them.
BLOCKED_RESOURCE_TYPES = {"image", "media", "font"}


async def block_heavy_resources(route: Route) -> None:
    if route.request.resource_type in BLOCKED_RESOURCE_TYPES:
        await route.abort()
    else:
        await route.continue_()


@asynccontextmanager
async def launch_browser(config: ScrapeConfig) -> AsyncIterator[Browser]:
    async with async_playwright() as p:
        try:
            browser = await p.chromium.launch(headless=config.headless)
        except Exception as exc:
            raise CaptureError("chromium", "launch", exc) from exc
        try:
            yield browser
        finally:
            await browser.close()


async def capture_snapshot(browser: Browser, url: str, config: ScrapeConfig) -> StyleSnapshot:
    try:
        context = await browser.new_context(
            viewport=config.viewport,
            device_scale_factor=1,
            user_agent=config.user_agent,
        )
    except Exception as exc:
        raise CaptureError(url, "new_context", exc) from exc

    stage = "new_page"
    try:
        page = await context.new_page()
        if config.block_resources:
            stage = "route"
            await page.route("**/*", block_heavy_resources)

        stage = "goto"
        logger.info("Navigating to %s with timeout %sms", url, config.timeout_ms)
        await page.goto(url, wait_until="domcontentloaded", timeout=config.timeout_ms)
        stage = "wait_body"
        await page.wait_for_selector("body", state="attached", timeout=LOAD_STATE_TIMEOUT_MS)
        try:
            stage = "wait_networkidle"
            await page.wait_for_load_state("networkidle", timeout=LOAD_STATE_TIMEOUT_MS)
        except PlaywrightTimeoutError:
            logger.debug("Network did not go idle for %s, continuing", url)
        stage = "post_wait"
        await page.wait_for_timeout(config.settle_ms)

        stage = "snapshot"
        data = await page.evaluate(SNAPSHOT_SCRIPT, SNAPSHOT_PROPS)
        snapshot = StyleSnapshot.from_dict(data or {})
        logger.info("Captured %d elements from %s", len(snapshot.elements), url)
        return snapshot
    except Exception as exc:
        raise CaptureError(url, stage, exc) from exc
    finally:
        await context.close()
