"""Rule-based parsing of the loosely formatted text found on whisky pages."""

import math
import re
from typing import Optional, Sequence

from models import CURRENCY_SYMBOLS, Currency, Price, WeakDate

# --- Splitting patterns ---
# Digits with optional comma grouping and at most one decimal point: '21,500', '11,34.1029'
_NUM_RE = re.compile(r"\d+[\d,]*\.?\d*")
# Letters, spaces and currency symbols: 'YEAR OLD', '$€CC'
_STR_RE = re.compile(rf"[{re.escape(CURRENCY_SYMBOLS)}A-Za-z ]+")

# Bounded digit runs: a year has at most 4 digits, a day or month 2, an age 3
_YEAR_RE = re.compile(r"\d{1,4}")
_DAY_MONTH_RE = re.compile(r"\d{1,2}")
_AGE_RE = re.compile(r"\d{1,3}")
_WHITESPACE_RE = re.compile(r"\s+")

# Whiskybase date layouts, most specific first: DD.MM.YYYY, MM.YYYY, YYYY
_DATE_DELIMITER = "."


def split_nums_and_strs(text: str) -> tuple[list[str], list[str]]:
    """Split text into its numeric runs and its alphabetic/symbol runs.

    '30 YEAR OLD' → (['30'], ['YEAR OLD'])
    '1,280,000₩' → (['1,280,000'], ['₩'])
    """
    nums = _NUM_RE.findall(text)
    strs = [m.strip() for m in _STR_RE.findall(text)]
    return nums, [s for s in strs if s]


def _first_number(text: str) -> Optional[str]:
    nums, _ = split_nums_and_strs(text)
    return nums[0] if nums else None


def _parse_digits(token: str, pattern: re.Pattern) -> Optional[int]:
    if not pattern.fullmatch(token):
        return None
    return int(token)


def _parse_float(token: str) -> Optional[float]:
    try:
        value = float(token)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_bounded(token: str, low: int, high: int) -> Optional[int]:
    value = _parse_digits(token, _DAY_MONTH_RE)
    if value is None or not low <= value <= high:
        return None
    return value


def parse_price(text: str) -> Optional[Price]:
    """Parse '£21,500' → Price(21500.0, GBP).

    The first number and the first currency symbol are taken independently,
    so '1,280,000₩' is recognised as well. Both must be present.
    """
    number = _first_number(text)
    if number is None:
        return None
    value = _parse_float(number.replace(",", ""))
    if value is None:
        return None

    _, strs = split_nums_and_strs(text)
    currency = next(
        (c for s in strs for c in map(Currency.from_symbol, s) if c is not None),
        None,
    )
    if currency is None:
        return None
    return Price(value, currency)


def parse_weak_date(text: str) -> Optional[WeakDate]:
    """Parse 'DD.MM.YYYY', 'MM.YYYY' or 'YYYY'.

    The year must be numeric or the whole date is rejected; an unreadable
    day or month is dropped on its own.
    """
    parts = text.split(_DATE_DELIMITER)
    if len(parts) == 3:
        day, month, year = parts
    elif len(parts) == 2:
        day, (month, year) = None, parts
    elif len(parts) == 1:
        day, month, year = None, None, parts[0]
    else:
        return None

    parsed_year = _parse_digits(year, _YEAR_RE)
    if parsed_year is None:
        return None
    return WeakDate(
        year=parsed_year,
        month=_parse_bounded(month, 1, 12) if month is not None else None,
        day=_parse_bounded(day, 1, 31) if day is not None else None,
    )


def parse_year(text: str) -> Optional[WeakDate]:
    """Parse a value known to carry only a year, e.g. an auction 'Vintage' cell."""
    year = _parse_digits(text.strip(), _YEAR_RE)
    if year is None:
        return None
    return WeakDate(year=year)


def parse_abv(text: str) -> Optional[float]:
    """Parse '52.0 % Vol.' → 52.0. Units are not checked."""
    number = _first_number(text)
    if number is None:
        return None
    return _parse_float(number)


def parse_age(text: str) -> Optional[int]:
    """Parse '30 YEAR OLD' → 30."""
    number = _first_number(text)
    if number is None:
        return None
    return _parse_digits(number, _AGE_RE)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def select_by_column(tokens: Sequence[str], column: str) -> Optional[str]:
    """Return the token right after the first token equal to `column`.

    ['Distillery', 'Glen Foo', 'Bottler', 'OB'], 'Bottler' → 'OB'
    A label with nothing after it counts as missing.
    """
    for i, token in enumerate(tokens):
        if token == column:
            return tokens[i + 1] if i + 1 < len(tokens) else None
    return None
