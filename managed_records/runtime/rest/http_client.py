"""HTTP client helper."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from ...core.exceptions import AmbiguousStatus, MalformedBody, NetworkFailure, ServerError


class HTTPClient:
    """Async HTTP client wrapper.

    Classifies every response into either a decoded JSON array or one of
    the FetchError subclasses; aiohttp exceptions never escape.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get_json_array(
        self,
        url: str,
        params: list[tuple[str, str]] | dict[str, Any] | None = None,
    ) -> list[Any]:
        """GET request expecting a JSON array body.

        Raises:
            ServerError: Status in [400, 600)
            AmbiguousStatus: Any other non-2xx status
            MalformedBody: 2xx body that is not a JSON array
            NetworkFailure: Connection-level error or timeout
        """
        try:
            async with self.session.get(url, params=params) as response:
                status = response.status
                request_url = str(response.url)

                if 400 <= status < 600:
                    raise ServerError(
                        f"Received {status} response code during fetch",
                        status_code=status,
                        url=request_url,
                    )
                if not 200 <= status < 300:
                    raise AmbiguousStatus(
                        f"Received unexpected {status} response code during fetch",
                        status_code=status,
                        url=request_url,
                    )

                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise MalformedBody(
                        f"Response body is not valid JSON: {e}",
                        status_code=status,
                        url=request_url,
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkFailure(
                f"Request failed: {e.__class__.__name__}: {e}", url=url
            ) from e

        if not isinstance(data, list):
            raise MalformedBody(
                f"Expected a JSON array, got {type(data).__name__}",
                status_code=status,
                url=request_url,
            )
        return data

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
