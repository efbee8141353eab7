#!/usr/bin/env python3
"""Main entry point for whisky scraper."""

import argparse
import json
import logging
from typing import Optional

from dotenv import load_dotenv
load_dotenv()

from collector import Collector
from config import MAX_PAGES, SITES
from parsers import PARSERS

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def print_record(record) -> None:
    """Write one record to stdout as a JSON line."""
    print(json.dumps(record.to_dict(), ensure_ascii=False), flush=True)


def scrape_site(
    site_name: str,
    max_pages: Optional[int] = MAX_PAGES,
    delay: Optional[float] = None,
) -> int:
    """Crawl a single site, printing each record. Returns the record count."""
    if site_name not in SITES:
        logger.error(f"Unknown site: {site_name}")
        return 0

    site_config = SITES[site_name]
    parser_class = PARSERS.get(site_name)
    if not parser_class:
        logger.error(f"No parser for site: {site_name}")
        return 0

    logger.info(f"--- Scraping {site_config['display_name']} ({site_name}) ---")

    collector = Collector(parser_class(), delay=delay, max_pages=max_pages)
    for record in collector.crawl():
        print_record(record)

    stats = collector.stats
    logger.info(
        f"[{site_name}] {stats.records} records, {stats.skipped} skipped, "
        f"{stats.failed} failed fetches ({stats.fetched} fetched)"
    )
    return stats.records


def scrape_all(max_pages: Optional[int] = MAX_PAGES, delay: Optional[float] = None) -> int:
    """Crawl all configured sites."""
    total = 0
    for site_name in SITES:
        try:
            total += scrape_site(site_name, max_pages=max_pages, delay=delay)
        except Exception as e:
            logger.error(f"Failed to scrape {site_name}: {e}")
    return total


def main():
    parser = argparse.ArgumentParser(description="Whisky sitemap scraper")
    parser.add_argument(
        "--site", type=str, choices=sorted(SITES), help="Scrape a single site (e.g., whiskybase)"
    )
    parser.add_argument(
        "--once", action="store_true", help="Run once and exit (no scheduler)"
    )
    parser.add_argument(
        "--max-pages", type=int, default=MAX_PAGES, help="Stop each site after this many whisky pages"
    )
    parser.add_argument(
        "--delay", type=float, default=None, help="Max random delay between requests, seconds (overrides site config)"
    )
    args = parser.parse_args()

    if args.once or args.site:
        if args.site:
            total = scrape_site(args.site, max_pages=args.max_pages, delay=args.delay)
        else:
            total = scrape_all(max_pages=args.max_pages, delay=args.delay)
        logger.info(f"=== Done. {total} records ===")
    else:
        # Run with scheduler
        from scheduler import run_scheduler
        run_scheduler(max_pages=args.max_pages, delay=args.delay)


if __name__ == "__main__":
    main()
