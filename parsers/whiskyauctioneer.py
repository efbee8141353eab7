"""Parser for whiskyauctioneer.com."""

from config import NOT_APPLICABLE
from extraction.models import FieldRule, PageProfile
from models import WhiskyAuctioneerWhisky
from parsers.base import SitemapScraper

_RIGHT = "#new-layout > div.box-outer > div.right"
_BID_INFO = f"{_RIGHT} > div.place-bid.bid-section.bid-info"


class WhiskyAuctioneerParser(SitemapScraper):
    """
    whiskyauctioneer.com: sub-sitemaps mix lots with other pages; only
    URLs containing 'lot/' are whisky pages.
    Name: h1 in div.left-heading
    Price: div.amount.winning span (required, a lot page always shows a bid)
    Reserve: div.reserve-price, 'RESERVE HAS BEEN MET' once met
    Details: div.topvbn 'Label:' / value pairs, 'N/A' when unknown
    """

    sub_filter = "lot/"
    record_cls = WhiskyAuctioneerWhisky
    profile = PageProfile(
        detail_selector="#new-layout > div.productbuttom > div.left > div.topvbn > div",
        exclude=[NOT_APPLICABLE],
        fields=[
            FieldRule(field="name", selector=f"{_RIGHT} > div.left-heading > h1", required=True),
            FieldRule(
                field="price",
                selector=f"{_BID_INFO} > div.amount.winning > span",
                parser="price",
                required=True,
            ),
            FieldRule(
                field="reservation",
                selector=f"{_BID_INFO} > div.reserve-price",
                flag="RESERVE HAS BEEN MET",
            ),
            FieldRule(field="distillery", column="Distillery:"),
            FieldRule(field="age", column="Age:", parser="age"),
            FieldRule(field="vintage", column="Vintage:", parser="year"),
            FieldRule(field="region", column="Region:"),
            FieldRule(field="bottler", column="Bottler:"),
            FieldRule(field="cask_type", column="Cask Type:"),
            # The strength cell sometimes holds proof instead of a percentage
            FieldRule(field="abv", column="Bottled Strength:", contains="%", parser="abv"),
            FieldRule(field="bottle_size", column="Bottle Size:"),
        ],
    )

    def __init__(self):
        super().__init__("whiskyauctioneer")
