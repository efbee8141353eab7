"""Parser for whiskybase.com."""

from extraction.models import FieldRule, PageProfile
from models import WhiskybaseWhisky
from parsers.base import SitemapScraper


class WhiskybaseParser(SitemapScraper):
    """
    whiskybase.com: the root sitemap also lists sitemaps for distilleries,
    bottlers, etc.; only the 'whiskies' ones are followed.
    Name: h1, split over several text nodes and line breaks
    Details: div#whisky-details dl, dt/dd pairs
    Dates: 'DD.MM.YYYY', 'MM.YYYY' or 'YYYY'
    """

    root_filter = "whiskies"
    record_cls = WhiskybaseWhisky
    profile = PageProfile(
        detail_selector="div#whisky-details dl",
        fields=[
            FieldRule(field="name", selector="h1", all_text=True, parser="collapse", required=True),
            FieldRule(field="distillery", column="Distillery"),
            FieldRule(field="bottler", column="Bottler"),
            FieldRule(field="abv", column="Strength", parser="abv"),
            FieldRule(field="vintage", column="Vintage", parser="weak_date"),
            FieldRule(field="bottled", column="Bottled", parser="weak_date"),
            FieldRule(field="whiskybase_id", column="Whiskybase ID", required=True),
            FieldRule(field="whiskybase_score", selector="span.votes-rating-current", required=True),
        ],
    )

    def __init__(self):
        super().__init__("whiskybase")
