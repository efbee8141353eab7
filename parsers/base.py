"""Base scraper for sitemap-driven whisky sites."""

import logging
from typing import Any, Optional

from bs4 import BeautifulSoup

from config import SITES
from extraction.extractor import MissingFieldError, extract_fields, select_all, select_one_text
from extraction.models import PageProfile
from state import NEXT_STATE, CrawlState, ScrapeResult, Visit

logger = logging.getLogger(__name__)


class SitemapScraper:
    """Shared traversal for sites that publish a sitemap index.

    sitemap index → sitemaps → whisky pages. Every step is a pure function of
    the fetched document: it returns the record and the follow-up visits
    instead of touching the crawl queue.

    Subclasses provide `profile` and `record_cls`, and may narrow which
    sitemap entries are followed with `root_filter` / `sub_filter`.
    """

    profile: PageProfile
    record_cls: type
    root_filter: Optional[str] = None  # child sitemap URL must contain this
    sub_filter: Optional[str] = None  # page URL must contain this

    def __init__(self, site_name: str):
        site = SITES[site_name]
        self.site_name = site_name
        self.domain = site["domain"]
        self.sitemap_url = site["sitemap_url"]
        self.delay = site["delay"]
        self._handlers = {
            CrawlState.ROOT_SITEMAP: self.parse_root_sitemap,
            CrawlState.SUB_SITEMAP: self.parse_sub_sitemap,
            CrawlState.PAGE_DETAIL: self.parse_page,
        }

    def start(self) -> Visit:
        return Visit(self.sitemap_url, CrawlState.ROOT_SITEMAP)

    @staticmethod
    def document_features(state: CrawlState) -> str:
        """BeautifulSoup parser to use for a document fetched in `state`."""
        return "lxml" if state is CrawlState.PAGE_DETAIL else "xml"

    def scrape(self, soup: BeautifulSoup, state: CrawlState, url: str = "") -> ScrapeResult:
        return self._handlers[state](soup, url)

    def parse_root_sitemap(self, soup: BeautifulSoup, url: str = "") -> ScrapeResult:
        locations = self._locations(soup, "sitemap", self.root_filter)
        logger.info(f"[{self.site_name}] {url}: {len(locations)} sitemaps")
        next_state = NEXT_STATE[CrawlState.ROOT_SITEMAP]
        return ScrapeResult(visits=[Visit(loc, next_state) for loc in locations])

    def parse_sub_sitemap(self, soup: BeautifulSoup, url: str = "") -> ScrapeResult:
        locations = self._locations(soup, "url", self.sub_filter)
        logger.info(f"[{self.site_name}] {url}: {len(locations)} pages")
        next_state = NEXT_STATE[CrawlState.SUB_SITEMAP]
        return ScrapeResult(visits=[Visit(loc, next_state) for loc in locations])

    def parse_page(self, soup: BeautifulSoup, url: str = "") -> ScrapeResult:
        try:
            values = extract_fields(soup, self.profile)
        except MissingFieldError as e:
            logger.warning(f"[{self.site_name}] Skipping {url}: {e}")
            return ScrapeResult(skip_reason=str(e))
        return ScrapeResult(record=self.build_record(values, url))

    def build_record(self, values: dict[str, Any], url: str) -> Any:
        return self.record_cls(url=url or None, **values)

    def _locations(self, soup: BeautifulSoup, entry_tag: str, must_contain: Optional[str]) -> list[str]:
        """<loc> of every <sitemap>/<url> entry, optionally filtered by substring."""
        locations = []
        for entry in select_all(soup, entry_tag):
            loc = select_one_text(entry, "loc")
            if not loc:
                logger.debug(f"[{self.site_name}] {entry_tag} entry without <loc>")
                continue
            if must_contain and must_contain not in loc:
                continue
            locations.append(loc)
        return locations
