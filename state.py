"""Crawl states and the results a visit hands back to the collector."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class CrawlState(Enum):
    ROOT_SITEMAP = "root_sitemap"  # sitemap index listing other sitemaps
    SUB_SITEMAP = "sub_sitemap"  # urlset listing pages
    PAGE_DETAIL = "page_detail"  # a single whisky page, produces a record


# Traversal only moves forward; the page state is terminal.
NEXT_STATE: dict[CrawlState, Optional[CrawlState]] = {
    CrawlState.ROOT_SITEMAP: CrawlState.SUB_SITEMAP,
    CrawlState.SUB_SITEMAP: CrawlState.PAGE_DETAIL,
    CrawlState.PAGE_DETAIL: None,
}


@dataclass(frozen=True)
class Visit:
    url: str
    state: CrawlState


@dataclass
class ScrapeResult:
    """Outcome of one fetched document.

    Sitemap states fill `visits`; the page state fills either `record` or
    `skip_reason`.
    """

    visits: list[Visit] = field(default_factory=list)
    record: Optional[Any] = None
    skip_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skip_reason is not None
