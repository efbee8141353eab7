"""Parser for whisky.auction."""

from config import NOT_APPLICABLE
from extraction.models import FieldRule, PageProfile
from models import WhiskyAuctionWhisky
from parsers.base import SitemapScraper

_PRODUCT = "div.product-data"
_LOT_SIZE_AND_ABV = f"{_PRODUCT} > h1 > span.lotName3.line-3"  # '70cl / 46.0%'


class WhiskyAuctionParser(SitemapScraper):
    """
    whisky.auction: root sitemap lists one sitemap per auction (?auctionId=...)
    plus unrelated ones, which are skipped.
    Name: span.lotName1 in the product header
    Price: span.winningBid ('N/A' before the hammer falls)
    Details: div.metawrap label/value pairs (Age, Vintage, Region, Bottler, Cask Type)
    Size / ABV: span.lotName3, '/'-separated
    """

    root_filter = "auctionId"
    record_cls = WhiskyAuctionWhisky
    profile = PageProfile(
        detail_selector="#contentsecondary > div > div.content > div.meta > div.metawrap",
        exclude=[NOT_APPLICABLE],
        fields=[
            FieldRule(field="name", selector=f"{_PRODUCT} > h1 > span.lotName1.line-1", required=True),
            FieldRule(
                field="price",
                selector=f"{_PRODUCT} > div.lot-detail-data > div.hammerprice > div > span.winningBid",
                parser="price",
            ),
            FieldRule(field="age", column="Age", parser="age"),
            FieldRule(field="vintage", column="Vintage", parser="year"),
            FieldRule(field="region", column="Region"),
            FieldRule(field="bottler", column="Bottler"),
            FieldRule(field="cask_type", column="Cask Type"),
            FieldRule(field="abv", selector=_LOT_SIZE_AND_ABV, split="/", part=1, parser="abv"),
            FieldRule(field="bottle_size", selector=_LOT_SIZE_AND_ABV, split="/", part=0),
        ],
    )

    def __init__(self):
        super().__init__("whiskyauction")
