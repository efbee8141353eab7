"""Data models for whisky scraper."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class Currency(str, Enum):
    """Currencies recognised by their symbol only ('USD' text is not a currency)."""

    GBP = "GBP"
    KRW = "KRW"
    USD = "USD"
    EUR = "EUR"
    JPY = "JPY"

    @property
    def symbol(self) -> str:
        return _SYMBOLS_BY_CURRENCY[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Currency"]:
        return _CURRENCIES_BY_SYMBOL.get(symbol)


# https://en.wikipedia.org/wiki/Currency_symbol
_CURRENCIES_BY_SYMBOL = {
    "£": Currency.GBP,
    "₩": Currency.KRW,
    "$": Currency.USD,
    "€": Currency.EUR,
    "¥": Currency.JPY,
}
_SYMBOLS_BY_CURRENCY = {c: s for s, c in _CURRENCIES_BY_SYMBOL.items()}
CURRENCY_SYMBOLS = "".join(_CURRENCIES_BY_SYMBOL)


@dataclass(frozen=True)
class Price:
    value: float
    currency: Currency

    def __str__(self) -> str:
        return f"{self.currency.symbol}{self.value:,.2f}"


@dataclass(frozen=True)
class WeakDate:
    """A calendar date where only the year is guaranteed.

    The string form mirrors the source layouts: 'DD.MM.YYYY', 'MM.YYYY'
    or 'YYYY', depending on which parts are known.
    """

    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    def __str__(self) -> str:
        month = f"{self.month:02d}" if self.month is not None else ""
        if self.day is not None:
            return f"{self.day:02d}.{month}.{self.year}"
        if self.month is not None:
            return f"{month}.{self.year}"
        return str(self.year)


@dataclass
class WhiskyAuctionWhisky:
    name: str
    price: Optional[Price] = None
    age: Optional[int] = None
    vintage: Optional[WeakDate] = None
    region: Optional[str] = None
    bottler: Optional[str] = None
    cask_type: Optional[str] = None
    abv: Optional[float] = None
    bottle_size: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WhiskyAuctioneerWhisky:
    name: str
    price: Price
    reservation: Optional[bool] = None  # True once the reserve price has been met
    distillery: Optional[str] = None
    age: Optional[int] = None
    vintage: Optional[WeakDate] = None
    region: Optional[str] = None
    bottler: Optional[str] = None
    cask_type: Optional[str] = None
    abv: Optional[float] = None
    bottle_size: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WhiskybaseWhisky:
    name: str
    whiskybase_id: str
    whiskybase_score: str  # kept as shown on the page, e.g. '87.52'
    distillery: Optional[str] = None
    bottler: Optional[str] = None
    abv: Optional[float] = None
    vintage: Optional[WeakDate] = None
    bottled: Optional[WeakDate] = None
    url: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
