# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# The result records every tool hands back to the agent, plus the two input
# constraints the tool schemas are built from (currency symbols, date form).
#
# Records are frozen: once the client has normalized an upstream payload,
# nothing downstream may edit it.  Python attributes are snake_case; the
# serialized form (to_dict) keeps the camelCase keys agents see on the wire.
# =============================================================================

from dataclasses import dataclass, field
from typing import Literal, get_args

# -----------------------------------------------------------------------------
# Input constraints
# -----------------------------------------------------------------------------
# Table C only quotes these twelve currencies.
CurrencyCode = Literal[
    "USD", "EUR", "GBP", "CHF", "AUD", "CAD",
    "SEK", "NOK", "DKK", "JPY", "CZK", "HUF",
]
CURRENCY_CODES: tuple[str, ...] = get_args(CurrencyCode)

# Lexical check only; "2025-02-30" passes.
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Upstream refuses history queries spanning more than this many days.
MAX_HISTORY_DAYS = 93


# -----------------------------------------------------------------------------
# RateResult — one day's bid/ask quote from Table C
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RateResult:
    """Bid/ask rate of a single currency on a single trading day."""

    table: str                         # "C"
    currency: str                      # "dolar amerykański"
    code: str                          # "USD"
    bid: float                         # Bank buys at (PLN)
    ask: float                         # Bank sells at (PLN)
    trading_date: str                  # Falls back to effective_date
    effective_date: str                # Publication date of the table

    def to_dict(self) -> dict:
        return {
            "table": self.table,
            "currency": self.currency,
            "code": self.code,
            "bid": self.bid,
            "ask": self.ask,
            "tradingDate": self.trading_date,
            "effectiveDate": self.effective_date,
        }


# -----------------------------------------------------------------------------
# GoldResult — NBP price of 1 g of fine gold
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GoldResult:
    """Price in PLN of one gram of 1000-millesimal gold."""

    date: str
    price: float

    def to_dict(self) -> dict:
        return {"date": self.date, "price": self.price}


# -----------------------------------------------------------------------------
# HistoryRate / HistoryResult — a bid/ask series over a date range
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class HistoryRate:
    """One entry of a rate series; same date fallback as RateResult."""

    trading_date: str
    effective_date: str
    bid: float
    ask: float

    def to_dict(self) -> dict:
        return {
            "tradingDate": self.trading_date,
            "effectiveDate": self.effective_date,
            "bid": self.bid,
            "ask": self.ask,
        }


@dataclass(frozen=True)
class HistoryResult:
    """Rates of one currency for every trading day in a range.

    ``rates`` keeps the order the upstream returned them in (chronological).
    """

    table: str
    currency: str
    code: str
    rates: tuple[HistoryRate, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "table": self.table,
            "currency": self.currency,
            "code": self.code,
            "rates": [rate.to_dict() for rate in self.rates],
        }
