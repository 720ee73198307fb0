"""
Upstream client for proxied third-party APIs.

Every proxy action issues exactly one outbound GET through this client. Any
failure (transport error, non-200 status, body that is not JSON or does not
match the expected model) is reported as an UpstreamError so the route can
answer with its fixed error message.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class UpstreamError(Exception):
    """Raised when the upstream API cannot produce a usable payload."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


class UpstreamClient:
    """
    Thin async wrapper around httpx for fetching JSON from third-party APIs.

    Usage:
        upstream = UpstreamClient()
        page = await upstream.fetch("https://catfact.ninja/facts", CatFactsPage)
        await upstream.close()
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the upstream client.

        Args:
            timeout: Timeout for upstream requests in seconds, None for no timeout
            transport: Optional httpx transport (tests pass an httpx.MockTransport)
        """
        self.timeout = timeout
        self._transport = transport
        self._client = self._new_client()

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    def open(self):
        """Replace the HTTP client if a previous close() shut it down."""
        if self._client.is_closed:
            self._client = self._new_client()

    async def get(self, url: str) -> httpx.Response:
        """
        Issue one GET request and require an exact 200 response.

        Raises:
            UpstreamError: If the request fails or the status is not 200
        """
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as exc:
            raise UpstreamError(url, f"timeout: {exc!r}") from exc
        except httpx.RequestError as exc:
            raise UpstreamError(url, f"request failed: {exc!r}") from exc

        if response.status_code != 200:
            raise UpstreamError(
                url,
                f"unexpected status {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )
        return response

    async def fetch(self, url: str, model: type[PayloadT]) -> PayloadT:
        """
        GET the URL and validate the JSON body against the given model.

        Raises:
            UpstreamError: On any transport, status or body-shape failure
        """
        response = await self.get(url)
        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(url, f"invalid JSON body: {exc}", response.status_code) from exc

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise UpstreamError(
                url,
                f"unexpected body shape for {model.__name__}: {exc.error_count()} error(s)",
                response.status_code,
            ) from exc

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()
