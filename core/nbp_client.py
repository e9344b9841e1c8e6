# =============================================================================
# core/nbp_client.py  —  NBP Web API client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a validated query into exactly ONE GET against api.nbp.pl and
#   reshapes the JSON answer into a result record from core/models.py.
#
# ENDPOINTS (Table C = bid/ask rates):
#   {base}/exchangerates/rates/c/{code}/                 latest rate
#   {base}/exchangerates/rates/c/{code}/{date}/          rate on a date
#   {base}/exchangerates/rates/c/{code}/{start}/{end}/   rate series
#   {base}/cenyzlota/                                    latest gold price
#   {base}/cenyzlota/{date}/                             gold price on a date
#
# FAILURE MODEL:
#   One attempt per call, bounded by settings.request_timeout.  Timeouts,
#   transport errors and non-2xx statuses are raised as the classes in
#   core/errors.py.  A body that is not JSON raises ValueError unchanged;
#   JSON that is not shaped like an NBP payload also raises ValueError.
#   3xx redirects are followed.
#
# Each call opens its own short-lived AsyncClient; no connection pool or
# other state is shared between concurrent tool invocations.
# =============================================================================

import asyncio
import logging
from contextlib import contextmanager

import httpx

from core.config import settings
from core.errors import (
    EmptyResultError,
    NetworkError,
    RequestTimeout,
    UpstreamBadRequest,
    UpstreamNotFound,
    UpstreamStatusError,
)
from core.models import GoldResult, HistoryRate, HistoryResult, RateResult

logger = logging.getLogger(__name__)


# =============================================================================
# HTTP plumbing
# =============================================================================
def _build_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=transport,
        follow_redirects=True,
        headers={"Accept": "application/json"},
        timeout=settings.request_timeout,
    )


async def _get(url: str) -> httpx.Response:
    """GET ``url`` once, cancelling it if it outlives the timeout."""
    timeout = settings.request_timeout
    logger.debug("GET %s", url)

    async with _build_client() as client:
        try:
            return await asyncio.wait_for(client.get(url), timeout=timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise RequestTimeout(timeout) from exc
        except httpx.TransportError as exc:
            raise NetworkError(exc) from exc


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    logger.debug("NBP answered HTTP %s for %s", response.status_code, response.url)
    if response.status_code == 404:
        raise UpstreamNotFound()
    if response.status_code == 400:
        raise UpstreamBadRequest()
    raise UpstreamStatusError(response.status_code)


async def _fetch_json(url: str):
    response = await _get(url)
    _raise_for_status(response)
    return response.json()


@contextmanager
def _unexpected_shape():
    """Turn a payload that is not shaped like NBP JSON into a ValueError."""
    try:
        yield
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise ValueError(
            f"Unexpected response from NBP API ({type(exc).__name__}: {exc})"
        ) from exc


def _trading_date(rate: dict) -> str:
    # Only Table C carries tradingDate; absent or empty means "same day".
    return rate.get("tradingDate") or rate["effectiveDate"]


# =============================================================================
# PUBLIC API
# =============================================================================
async def get_currency_rate(currency_code: str, date: str | None = None) -> RateResult:
    """Fetch the Table C bid/ask rate for ``currency_code``.

    Args:
        currency_code: One of the twelve Table C symbols (e.g. "USD").
        date: Optional "YYYY-MM-DD".  Omitted means the latest published table.

    Returns:
        A RateResult built from the first (and only) entry of ``rates``.

    Raises:
        EmptyResultError: The upstream returned no rate entries.
        NbpError: Any other classified upstream failure.
    """
    url = f"{settings.api_base}/exchangerates/rates/c/{currency_code}/"
    if date:
        url += f"{date}/"

    data = await _fetch_json(url)

    with _unexpected_shape():
        rates = data.get("rates") or []
        if not rates:
            raise EmptyResultError("No rate data returned from NBP API")

        rate = rates[0]
        return RateResult(
            table=data["table"],
            currency=data["currency"],
            code=data["code"],
            bid=rate["bid"],
            ask=rate["ask"],
            trading_date=_trading_date(rate),
            effective_date=rate["effectiveDate"],
        )


async def get_gold_price(date: str | None = None) -> GoldResult:
    """Fetch the NBP price of 1 g of fine gold (latest, or on ``date``)."""
    url = f"{settings.api_base}/cenyzlota/"
    if date:
        url += f"{date}/"

    data = await _fetch_json(url)

    with _unexpected_shape():
        if not data:
            raise EmptyResultError("No gold price data returned from NBP API")

        # Upstream field names are Polish: data = date, cena = price.
        entry = data[0]
        return GoldResult(date=entry["data"], price=entry["cena"])


async def get_currency_history(
    currency_code: str, start_date: str, end_date: str
) -> HistoryResult:
    """Fetch every Table C rate of ``currency_code`` between two dates.

    The range limits (order, 93 days) are enforced by the caller; this
    function passes the dates through as-is.  Entries keep upstream order.
    """
    url = (
        f"{settings.api_base}/exchangerates/rates/c/"
        f"{currency_code}/{start_date}/{end_date}/"
    )

    data = await _fetch_json(url)

    with _unexpected_shape():
        rates = data.get("rates") or []
        if not rates:
            raise EmptyResultError(
                "No rate data returned from NBP API for the specified date range"
            )

        return HistoryResult(
            table=data["table"],
            currency=data["currency"],
            code=data["code"],
            rates=tuple(
                HistoryRate(
                    trading_date=_trading_date(rate),
                    effective_date=rate["effectiveDate"],
                    bid=rate["bid"],
                    ask=rate["ask"],
                )
                for rate in rates
            ),
        )
