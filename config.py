"""Site configurations for whisky scraper."""

import os

REQUEST_TIMEOUT = float(os.environ.get("WHISKY_REQUEST_TIMEOUT", "15"))  # seconds
USER_AGENT = os.environ.get(
    "WHISKY_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36",
)
MAX_PAGES = None  # max page visits per site, None = follow every sitemap entry
SCRAPE_INTERVAL_MINUTES = 24 * 60

# Marker some sites print in place of an empty value
NOT_APPLICABLE = "N/A"

SITES = {
    "whiskyauctioneer": {
        "name": "whiskyauctioneer",
        "display_name": "Whisky Auctioneer",
        "domain": "whiskyauctioneer.com",
        "sitemap_url": "https://whiskyauctioneer.com/sitemap.xml",
        "delay": 10.0,  # max random delay between requests, seconds
    },
    "whiskybase": {
        "name": "whiskybase",
        "display_name": "Whiskybase",
        "domain": "www.whiskybase.com",
        "sitemap_url": "https://www.whiskybase.com/sitemaps/sitemaps.xml",
        "delay": 0.01,
    },
    "whiskyauction": {
        "name": "whiskyauction",
        "display_name": "Whisky.Auction",
        "domain": "whisky.auction",
        "sitemap_url": "https://whisky.auction/sitemap.xml",
        "delay": 0.05,
    },
}
