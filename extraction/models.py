"""Pydantic models describing how a page maps onto an output record."""

from typing import Literal

from pydantic import BaseModel, model_validator

ValueParser = Literal["text", "collapse", "price", "weak_date", "year", "abv", "age"]


class FieldRule(BaseModel):
    """Where one record field lives on the page and how to read it.

    A value is located either by CSS `selector` (text of the first match) or
    by `column` label inside the profile's detail block, then cleaned in this
    order: sentinel exclusion, `split`/`part`, `contains` filter, `parser`
    (or `flag`).
    """

    field: str
    selector: str | None = None
    column: str | None = None
    all_text: bool = False  # join every text node of the match, not just the first
    split: str | None = None  # e.g. '70cl / 46.0%' split on '/'
    part: int = 0
    contains: str | None = None  # value is dropped unless it contains this
    parser: ValueParser = "text"
    flag: str | None = None  # value becomes `flag in text`
    required: bool = False

    @model_validator(mode="after")
    def check_location(self) -> "FieldRule":
        if (self.selector is None) == (self.column is None):
            raise ValueError(f"{self.field}: set exactly one of selector/column")
        return self


class PageProfile(BaseModel):
    """Extraction rules for the detail page of one site."""

    detail_selector: str | None = None  # block holding the label/value columns
    exclude: list[str] = []  # sentinel texts that mean 'no value'
    fields: list[FieldRule]

    @model_validator(mode="after")
    def check_columns(self) -> "PageProfile":
        if self.detail_selector is None and any(f.column for f in self.fields):
            raise ValueError("column rules need a detail_selector")
        return self
