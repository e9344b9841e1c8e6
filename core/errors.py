# =============================================================================
# core/errors.py  —  Error taxonomy
# =============================================================================
#
# Every failure a query can end in has its own class.  The client raises
# them; the tool server catches NbpError at its boundary and flattens the
# message into an "Error: ..." text envelope.  Nothing here is retried.
#
# Schema violations (unknown currency, malformed date) never get this far:
# FastMCP rejects them while validating tool arguments.
# =============================================================================


class NbpError(Exception):
    """Base class for every classified failure of an NBP query."""


class DateRangeError(NbpError):
    """History range is reversed or wider than the upstream allows."""


class UpstreamNotFound(NbpError):
    """HTTP 404: no table was published for the requested day(s)."""

    def __init__(self) -> None:
        super().__init__(
            "No exchange rate data available for this date. "
            "NBP does not publish rates on weekends and holidays."
        )


class UpstreamBadRequest(NbpError):
    """HTTP 400: the upstream did not accept the path parameters."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid request parameters. Please check the currency code and date format."
        )


class UpstreamStatusError(NbpError):
    """Any other non-2xx answer."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"NBP API error: HTTP {status_code}")


class RequestTimeout(NbpError):
    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(
            f"Request timeout - NBP API did not respond within {timeout:g} seconds"
        )


class NetworkError(NbpError):
    """Transport-level failure (DNS, refused or reset connection, ...)."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class EmptyResultError(NbpError):
    """The upstream answered 2xx but with no data rows."""
