"""Apply a PageProfile to a parsed page."""

import logging
from typing import Any, Callable, Optional

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, NavigableString

from extraction.models import FieldRule, PageProfile
from extraction.rules import (
    collapse_whitespace,
    parse_abv,
    parse_age,
    parse_price,
    parse_weak_date,
    parse_year,
    select_by_column,
)

logger = logging.getLogger(__name__)

_VALUE_PARSERS: dict[str, Callable[[str], Any]] = {
    "text": lambda s: s,
    "collapse": lambda s: collapse_whitespace(s) or None,
    "price": parse_price,
    "weak_date": parse_weak_date,
    "year": parse_year,
    "abv": parse_abv,
    "age": parse_age,
}


class MissingFieldError(Exception):
    """A field the profile marks as required is not on the page."""

    def __init__(self, field: str, location: str):
        super().__init__(f"missing {field} ({location})")
        self.field = field
        self.location = location


# --- Document access ---

def select_all(soup: BeautifulSoup | Tag, selector: str) -> list[Tag]:
    return soup.select(selector)


def first_text(element: Tag) -> Optional[str]:
    """First non-blank text node under an element."""
    return next(element.stripped_strings, None)


def select_one_text(soup: BeautifulSoup | Tag, selector: str) -> Optional[str]:
    """Text of the first element matching selector, or None."""
    el = soup.select_one(selector)
    if el is None:
        return None
    return first_text(el)


# Elements that never hold text and do not stand for a cell
_VOID_TAGS = frozenset({"br", "hr", "img", "input", "wbr", "meta", "link", "source"})


def _has_text(element: Tag) -> bool:
    return next(element.stripped_strings, None) is not None


def _flatten(element: Tag, tokens: list[str]) -> None:
    own_text = any(
        type(child) in (NavigableString, CData) and child.strip()
        for child in element.children
    )
    for child in element.children:
        if isinstance(child, Tag):
            if child.name in _VOID_TAGS:
                continue
            if _has_text(child):
                _flatten(child, tokens)
            elif not own_text:
                tokens.append("")
        elif type(child) in (NavigableString, CData):
            text = child.strip()
            if text:
                tokens.append(text)


def flat_text(element: Tag) -> list[str]:
    """Text tokens of the subtree in document order.

    Each text node gives one trimmed token and blank nodes are dropped. An
    element without any text is an empty cell and gives '' so labels keep
    their values aligned. Empty markup next to text of its own, such as an
    icon inside a value, gives nothing.
    """
    tokens: list[str] = []
    _flatten(element, tokens)
    return tokens


# --- Extraction ---

def _locate(soup: BeautifulSoup, rule: FieldRule, columns: list[str]) -> Optional[str]:
    if rule.column is not None:
        return select_by_column(columns, rule.column)
    if rule.all_text:
        el = soup.select_one(rule.selector)
        return el.get_text() if el is not None else None
    return select_one_text(soup, rule.selector)


def _clean(raw: str, rule: FieldRule, exclude: list[str]) -> Any:
    if not raw.strip() or raw in exclude:
        return None
    if rule.split is not None:
        parts = [p.strip() for p in raw.split(rule.split)]
        if rule.part >= len(parts):
            return None
        raw = parts[rule.part]
    if rule.contains is not None and rule.contains not in raw:
        return None
    if rule.flag is not None:
        return rule.flag in raw
    return _VALUE_PARSERS[rule.parser](raw)


def extract_fields(soup: BeautifulSoup, profile: PageProfile) -> dict[str, Any]:
    """Read every field of the profile from the page.

    Optional fields that are missing or unreadable come back as None.
    Raises MissingFieldError when a required field (or the detail block)
    cannot be read.
    """
    columns: list[str] = []
    if profile.detail_selector is not None:
        detail = soup.select_one(profile.detail_selector)
        if detail is None:
            raise MissingFieldError("detail", profile.detail_selector)
        columns = flat_text(detail)

    values: dict[str, Any] = {}
    for rule in profile.fields:
        raw = _locate(soup, rule, columns)
        value = _clean(raw, rule, profile.exclude) if raw is not None else None
        if value is None and raw is not None:
            logger.debug(f"Dropped {rule.field} value {raw!r}")
        if value is None and rule.required:
            raise MissingFieldError(rule.field, rule.column or rule.selector)
        values[rule.field] = value
    return values
