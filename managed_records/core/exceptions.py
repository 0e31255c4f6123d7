"""Custom exception hierarchy."""

from __future__ import annotations


class RecordsError(Exception):
    """Base exception for all library errors."""

    pass


class FetchError(RecordsError):
    """A page could not be fetched from the records endpoint.

    The page fetcher converts every subclass into a failed page outcome;
    none of them reach callers of ``retrieve``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class NetworkFailure(FetchError):
    """Transport-level failure (DNS, connection reset, timeout)."""

    pass


class ServerError(FetchError):
    """Endpoint answered with a status in [400, 600)."""

    def __init__(self, message: str, status_code: int, url: str | None = None) -> None:
        super().__init__(message, status_code=status_code, url=url)


class MalformedBody(FetchError):
    """Successful response whose body is not a JSON array of records."""

    pass


class AmbiguousStatus(FetchError):
    """Any other non-2xx status, e.g. an unfollowed redirect.

    Treated exactly like a network failure: the page yields no data.
    """

    def __init__(self, message: str, status_code: int, url: str | None = None) -> None:
        super().__init__(message, status_code=status_code, url=url)
