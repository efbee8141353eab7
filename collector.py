"""Crawl engine: fetches queued visits and feeds them through a site parser."""

import logging
import random
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from config import MAX_PAGES, REQUEST_TIMEOUT, USER_AGENT
from parsers.base import SitemapScraper
from state import CrawlState, ScrapeResult, Visit

logger = logging.getLogger(__name__)


@dataclass
class CrawlStats:
    fetched: int = 0
    failed: int = 0  # fetch errors
    records: int = 0
    skipped: int = 0  # pages missing a required field


def new_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept-Language": "en-GB,en;q=0.9",
    })
    return session


class Collector:
    """Drives one site's scraper from its root sitemap down to its pages.

    Only URLs on the site's domain are visited, each at most once, with a
    random pause of up to `delay` seconds between requests.
    """

    def __init__(
        self,
        scraper: SitemapScraper,
        delay: Optional[float] = None,
        max_pages: Optional[int] = MAX_PAGES,
        session: Optional[requests.Session] = None,
    ):
        self.scraper = scraper
        self.delay = scraper.delay if delay is None else delay
        self.max_pages = max_pages
        self.session = session or new_session()
        self.stats = CrawlStats()
        self._pending: deque[Visit] = deque()
        self._seen: set[str] = set()
        self._requested = False

    def visit(self, url: str, state: CrawlState) -> None:
        """Queue a URL to be fetched and handled in `state`."""
        if url in self._seen:
            return
        if urlparse(url).hostname != self.scraper.domain:
            logger.debug(f"[{self.scraper.site_name}] Ignoring off-site URL {url}")
            return
        self._seen.add(url)
        self._pending.append(Visit(url, state))

    def fetch(self, url: str) -> Optional[str]:
        """Fetch a document, or None on error."""
        self._pause()
        try:
            resp = self.session.get(url, timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
            resp.encoding = resp.apparent_encoding or "utf-8"
            return resp.text
        except requests.RequestException as e:
            logger.error(f"[{self.scraper.site_name}] Failed to fetch {url}: {e}")
            return None

    def on_fetch(self, text: str, visit: Visit) -> ScrapeResult:
        """Hand a fetched document to the scraper and queue its follow-up visits."""
        soup = BeautifulSoup(text, self.scraper.document_features(visit.state))
        result = self.scraper.scrape(soup, visit.state, visit.url)
        # Pushed in reverse so pages are popped in sitemap order
        for follow in reversed(result.visits):
            self.visit(follow.url, follow.state)
        return result

    def crawl(self) -> Iterator[Any]:
        """Yield records as pages are scraped.

        Visits are handled depth-first, so records start arriving while
        sitemaps are still pending.
        """
        start = self.scraper.start()
        self.visit(start.url, start.state)
        pages = 0

        while self._pending:
            visit = self._pending.pop()
            if visit.state is CrawlState.PAGE_DETAIL:
                if self.max_pages is not None and pages >= self.max_pages:
                    logger.info(f"[{self.scraper.site_name}] Page limit {self.max_pages} reached")
                    break
                pages += 1

            text = self.fetch(visit.url)
            if text is None:
                self.stats.failed += 1
                continue
            self.stats.fetched += 1

            try:
                result = self.on_fetch(text, visit)
            except Exception as e:
                logger.warning(f"[{self.scraper.site_name}] Failed to scrape {visit.url}: {e}")
                self.stats.skipped += 1
                continue

            if result.skipped:
                self.stats.skipped += 1
            if result.record is not None:
                self.stats.records += 1
                yield result.record

    def _pause(self) -> None:
        if self._requested and self.delay > 0:
            time.sleep(random.uniform(0, self.delay))
        self._requested = True
