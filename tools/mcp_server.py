# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares the three MCP tools an agent can call.  Each tool is a thin
#   wrapper around a core/nbp_client.py function: it validates arguments,
#   calls the client once, and serializes the outcome.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g., "getCurrencyRate")
#   2. FastMCP validates the arguments against the signature below
#      (currency enumeration, YYYY-MM-DD pattern) and rejects bad input
#      before our code runs
#   3. The tool calls core/ and gets a result record or an NbpError
#   4. Success → pretty-printed JSON text
#      Failure → ToolError("Error: <message>"), which MCP marks isError
#
# TOOL NAMES:
#   getCurrencyRate, getGoldPrice, getCurrencyHistory.  Parameter names are
#   camelCase too (currencyCode, startDate, ...) because they ARE the wire
#   schema clients see.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server                      # stdio (default)
#   python -m tools.mcp_server --transport sse      # /sse
#   python -m tools.mcp_server --transport http     # /mcp (streamable HTTP)
# =============================================================================

import argparse
import json
import logging
import sys
from datetime import date as Date
from datetime import timedelta
from typing import Annotated, NoReturn

from dotenv import load_dotenv

# Settings are read at import time; .env must be loaded first.
load_dotenv()

from fastmcp import FastMCP  # noqa: E402
from fastmcp.exceptions import ToolError  # noqa: E402
from pydantic import Field  # noqa: E402
from starlette.requests import Request  # noqa: E402
from starlette.responses import PlainTextResponse  # noqa: E402

from core import nbp_client  # noqa: E402
from core.config import TRANSPORTS, settings  # noqa: E402
from core.errors import DateRangeError, NbpError  # noqa: E402
from core.models import DATE_PATTERN, MAX_HISTORY_DAYS, CurrencyCode  # noqa: E402

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP protocol in stdio mode, so logs go to STDERR.
#   CYAN   → incoming requests (tool name + parameters)
#   GREEN  → response payloads
#   YELLOW → status / failure lines
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger("nbp_mcp")


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _respond(tool_name: str, result) -> str:
    """Serialize a result record, log it compactly in GREEN, return the text."""
    payload = result.to_dict()
    logger.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(payload, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _fail(tool_name: str, exc: Exception) -> NoReturn:
    """Flatten a classified failure into the MCP error envelope."""
    logger.warning(f"{_YELLOW}  ✗ {tool_name} failed ({type(exc).__name__}): {exc}{_RESET}")
    raise ToolError(f"Error: {exc}") from exc


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("NBP Exchange Rates")

# Shared argument types.  FastMCP turns these into the tool input schemas.
DateStr = Annotated[str, Field(pattern=DATE_PATTERN)]
CurrencyArg = Annotated[
    CurrencyCode,
    Field(
        description=(
            "Three-letter ISO 4217 currency code (uppercase). "
            "Supported currencies: USD, EUR, GBP, CHF, AUD, CAD, SEK, NOK, DKK, JPY, CZK, HUF"
        )
    ),
]


# =============================================================================
# Date range check for getCurrencyHistory
# =============================================================================
def parse_range_date(value: str) -> Date | None:
    """Read a YYYY-MM-DD string the way a JavaScript Date constructor does.

    Days 29-31 past the end of a month roll into the next month
    ("2025-02-30" is 2025-03-02).  Month 00 or 13+, day 00 or 32+ give None.
    """
    try:
        return Date.fromisoformat(value)
    except ValueError:
        pass

    year, month, day = (int(part) for part in value.split("-"))
    if not (1 <= month <= 12 and 1 <= day <= 31):
        return None
    try:
        return Date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def history_span_days(start_date: str, end_date: str) -> int | None:
    """Days from ``start_date`` to ``end_date``; None if either cannot be read.

    Unreadable dates skip the span check and the upstream gets to reject them.
    """
    start = parse_range_date(start_date)
    end = parse_range_date(end_date)
    if start is None or end is None:
        return None
    return (end - start).days


def check_history_range(start_date: str, end_date: str) -> None:
    """Raise DateRangeError if the range is reversed or too wide."""
    span = history_span_days(start_date, end_date)
    if span is None:
        return
    if span > MAX_HISTORY_DAYS:
        raise DateRangeError(
            f"Date range exceeds maximum of {MAX_HISTORY_DAYS} days. Please reduce the range."
        )
    if span < 0:
        raise DateRangeError("End date must be after start date.")


# =============================================================================
# TOOL 1: getCurrencyRate
# =============================================================================
@mcp.tool(name="getCurrencyRate")
async def get_currency_rate(
    currencyCode: CurrencyArg,
    date: Annotated[
        DateStr | None,
        Field(
            description=(
                "Optional: Specific date in YYYY-MM-DD format (e.g., '2025-10-01'). "
                "If omitted, returns the most recent available rate. "
                "Must be a trading day (not weekend/holiday) or you'll get a 404 error."
            )
        ),
    ] = None,
) -> str:
    """Get current or historical buy/sell exchange rates for a specific currency from the Polish National Bank (NBP).

    Returns bid (bank buy) and ask (bank sell) prices in Polish Zloty (PLN)
    from NBP Table C.  Use this when you need to know how much a currency
    costs to exchange at Polish banks.

    Note: NBP only publishes rates on trading days (Mon-Fri, excluding
    Polish holidays).

    Returns:
        JSON with: table, currency, code, bid, ask, tradingDate, effectiveDate
    """
    _log_request("getCurrencyRate", currencyCode=currencyCode, date=date)
    try:
        result = await nbp_client.get_currency_rate(currencyCode, date)
    except (NbpError, ValueError) as exc:
        _fail("getCurrencyRate", exc)

    _log_status(f"{result.code}: bid={result.bid} ask={result.ask} on {result.effective_date}")
    return _respond("getCurrencyRate", result)


# =============================================================================
# TOOL 2: getGoldPrice
# =============================================================================
@mcp.tool(name="getGoldPrice")
async def get_gold_price(
    date: Annotated[
        DateStr | None,
        Field(
            description=(
                "Optional: Specific date in YYYY-MM-DD format (e.g., '2025-10-01'). "
                "If omitted, returns the most recent available gold price. "
                "Must be a trading day after 2013-01-02, or you'll get a 404 error."
            )
        ),
    ] = None,
) -> str:
    """Get the official price of 1 gram of gold (1000 millesimal fineness) in Polish Zloty (PLN) as published by the Polish National Bank (NBP).

    Use this for investment analysis, comparing gold prices over time, or
    checking current gold valuation.

    Note: Prices are only published on trading days (Mon-Fri, excluding
    holidays).  Historical data is available from January 2, 2013 onwards.

    Returns:
        JSON with: date, price
    """
    _log_request("getGoldPrice", date=date)
    try:
        result = await nbp_client.get_gold_price(date)
    except (NbpError, ValueError) as exc:
        _fail("getGoldPrice", exc)

    return _respond("getGoldPrice", result)


# =============================================================================
# TOOL 3: getCurrencyHistory
# =============================================================================
# The 0..93 day window is checked HERE, before any network call.
# =============================================================================
@mcp.tool(name="getCurrencyHistory")
async def get_currency_history(
    currencyCode: CurrencyArg,
    startDate: Annotated[
        DateStr,
        Field(
            description=(
                "Start date in YYYY-MM-DD format (e.g., '2025-01-01'). "
                "Must be after 2002-01-02 when NBP digital records begin."
            )
        ),
    ],
    endDate: Annotated[
        DateStr,
        Field(
            description=(
                "End date in YYYY-MM-DD format (e.g., '2025-03-31'). "
                "Must be after startDate and within 93 days of startDate (NBP API limit)."
            )
        ),
    ],
) -> str:
    """Get a time series of historical exchange rates for a currency over a date range.

    Returns buy/sell rates (bid/ask) in PLN for each trading day within the
    specified period.  Useful for analyzing currency trends, calculating
    average rates, or comparing rates across months.

    IMPORTANT: NBP API limit is maximum 93 days per query.  Only trading
    days are included (weekends/holidays are skipped).

    Returns:
        JSON with: table, currency, code, rates (list of
        {tradingDate, effectiveDate, bid, ask}, oldest first)
    """
    _log_request(
        "getCurrencyHistory", currencyCode=currencyCode, startDate=startDate, endDate=endDate
    )
    try:
        check_history_range(startDate, endDate)
        result = await nbp_client.get_currency_history(currencyCode, startDate, endDate)
    except (NbpError, ValueError) as exc:
        _fail("getCurrencyHistory", exc)

    _log_status(f"{len(result.rates)} trading days for {result.code}")
    return _respond("getCurrencyHistory", result)


# =============================================================================
# Root path (sse / http transports only)
# =============================================================================
ROOT_INFO = (
    "NBP Exchange MCP Server\n\n"
    "A Model Context Protocol (MCP) server for querying Polish National Bank exchange rates.\n\n"
    "Available endpoints:\n"
    "  /sse - Server-Sent Events transport\n"
    "  /mcp - Streamable HTTP transport\n\n"
    "Available tools:\n"
    "  - getCurrencyRate: Get buy/sell rates for a currency\n"
    "  - getGoldPrice: Get NBP gold price\n"
    "  - getCurrencyHistory: Get historical rate series\n"
)


@mcp.custom_route("/", methods=["GET"])
async def root_info(request: Request) -> PlainTextResponse:
    return PlainTextResponse(ROOT_INFO)


# =============================================================================
# Server entry point
# =============================================================================
def main(argv: list[str] | None = None) -> None:
    """Run the MCP server on the configured (or requested) transport."""
    parser = argparse.ArgumentParser(description="NBP Exchange MCP Server")
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default=settings.transport,
        help="stdio for local agents, sse or http to serve over the network",
    )
    parser.add_argument("--host", default=settings.host, help="Bind host (sse/http)")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port (sse/http)")
    args = parser.parse_args(argv)

    if args.transport == "stdio":
        mcp.run(transport="stdio")
    else:
        logger.info(f"Serving {args.transport} transport on {args.host}:{args.port}")
        mcp.run(transport=args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
