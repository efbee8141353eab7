"""Site-specific parsers for sitemap-driven whisky sites."""

from parsers.whiskyauction import WhiskyAuctionParser
from parsers.whiskyauctioneer import WhiskyAuctioneerParser
from parsers.whiskybase import WhiskybaseParser

PARSERS = {
    "whiskyauctioneer": WhiskyAuctioneerParser,
    "whiskybase": WhiskybaseParser,
    "whiskyauction": WhiskyAuctionParser,
}
