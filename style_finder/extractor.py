"""
Extraction orchestration: snapshot in, result record out.
"""

import logging
from typing import Awaitable, Callable, Iterable, List, Optional
from urllib.parse import urlparse

from .browser import capture_snapshot, launch_browser
from .cache import ResultCache
from .config import ScrapeConfig
from .errors import CaptureError
from .gradients import extract_gradients
from .models import ExtractionResult
from .palette import extract_colors
from .snapshot import StyleSnapshot
from .title import extract_title
from .typography import extract_typography

logger = logging.getLogger(__name__)

CaptureFn = Callable[[str], Awaitable[StyleSnapshot]]


def is_valid_url(url: str) -> bool:
    parsed = urlparse(url or "")
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def extract_all(snapshot: StyleSnapshot, url: str) -> ExtractionResult:
    typography, meta = extract_typography(snapshot)
    return ExtractionResult(
        url=url,
        title=extract_title(snapshot),
        typography=typography,
        meta=meta,
        colors=extract_colors(snapshot),
        gradients=extract_gradients(snapshot),
    )


class StyleFinder:
    """Capture pages and extract their design tokens, caching successes by URL.

    ``capture`` replaces the Playwright capture, which is how tests drive the
    finder with synthetic snapshots.
    """

    def __init__(
        self,
        config: Optional[ScrapeConfig] = None,
        cache: Optional[ResultCache] = None,
        capture: Optional[CaptureFn] = None,
    ):
        self.config = config or ScrapeConfig()
        self.cache = cache if cache is not None else ResultCache(ttl=self.config.cache_ttl)
        self._capture = capture

    async def scrape(self, url: str, use_cache: bool = True) -> ExtractionResult:
        return await self._scrape(url, use_cache, self._capture)

    async def scrape_many(self, urls: Iterable[str], use_cache: bool = True) -> List[ExtractionResult]:
        urls = list(urls)
        evicted = self.cache.evict_expired()
        if evicted:
            logger.debug("Evicted %d expired cache entries", evicted)

        if self._capture is not None:
            return [await self._scrape(url, use_cache, self._capture) for url in urls]

        pending = [u for u in urls if is_valid_url(u) and not (use_cache and u in self.cache)]
        if not pending:
            return [await self._scrape(url, use_cache, None) for url in urls]

        try:
            async with launch_browser(self.config) as browser:
                async def capture(url: str) -> StyleSnapshot:
                    return await capture_snapshot(browser, url, self.config)

                return [await self._scrape(url, use_cache, capture) for url in urls]
        except CaptureError as exc:
            logger.error("Browser launch failed: %s", exc)
            return [ExtractionResult.failure(url, str(exc)) for url in urls]

    async def _scrape(self, url: str, use_cache: bool, capture: Optional[CaptureFn]) -> ExtractionResult:
        if not is_valid_url(url):
            return ExtractionResult.failure(url, "The provided URL is invalid.")

        if use_cache:
            cached = self.cache.get(url)
            if cached is not None:
                logger.info("Serving cached result for %s", url)
                return cached

        try:
            snapshot = await self._snapshot(url, capture)
        except CaptureError as exc:
            logger.error("Scraping error for %s: %s", url, exc)
            return ExtractionResult.failure(url, str(exc))

        result = extract_all(snapshot, url)
        if use_cache:
            self.cache.put(url, result)
        logger.info("Scraping complete for %s", url)
        return result

    async def _snapshot(self, url: str, capture: Optional[CaptureFn]) -> StyleSnapshot:
        if capture is not None:
            return await capture(url)
        async with launch_browser(self.config) as browser:
            return await capture_snapshot(browser, url, self.config)
