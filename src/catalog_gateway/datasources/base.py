"""Base REST data source, upstream error types and the explicit result wrapper."""

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from ..logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class UpstreamError(Exception):
    """Base class for failures talking to the upstream REST API."""

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None):
        super().__init__(message)
        self.method = method
        self.url = url


class UpstreamHTTPError(UpstreamError):
    """The upstream answered with a non-2xx status."""

    def __init__(
        self, status: int, body: str, *, method: str | None = None, url: str | None = None
    ):
        super().__init__(f"{status}: {body}", method=method, url=url)
        self.status = status
        self.body = body


class UpstreamTransportError(UpstreamError):
    """The request never produced an HTTP response (connect, read, timeout, protocol)."""

    def __init__(
        self, cause: Exception, *, method: str | None = None, url: str | None = None
    ):
        super().__init__(f"Upstream request failed: {cause}", method=method, url=url)
        self.cause = cause


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    """Outcome of an upstream call: either a value or the HTTP error it failed with."""

    value: T | None = None
    error: UpstreamHTTPError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def capture_http_errors(call: Awaitable[T]) -> UpstreamResult[T]:
    """Await an upstream call, turning an UpstreamHTTPError into a failed result.

    Transport errors and anything else still propagate to the caller.
    """
    try:
        value = await call
    except UpstreamHTTPError as e:
        return UpstreamResult(error=e)
    return UpstreamResult(value=value)


def create_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create the HTTP client shared by data sources.

    Args:
        timeout: Seconds to wait on the upstream, None to wait indefinitely
    """
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True)


class RESTDataSource:
    """Issue single REST requests against a fixed base URL and decode the response.

    One data source is built per GraphQL request. It holds no state between calls
    beyond the base URL and the HTTP client it sends through.
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None):
        """
        Args:
            base_url: Root of the upstream API; relative paths are resolved against it
            client: Shared HTTP client. When omitted the data source creates and owns one.
        """
        if not base_url.endswith("/"):
            base_url = f"{base_url}/"
        self.base_url = httpx.URL(base_url)
        self._owns_client = client is None
        self._client = client if client is not None else create_http_client()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this data source created it."""
        if self._owns_client:
            await self._client.aclose()

    def resolve_url(self, path: str) -> httpx.URL:
        return self.base_url.join(path)

    async def get(self, path: str) -> Any:
        return await self._send("GET", path)

    async def patch(self, path: str) -> Any:
        return await self._send("PATCH", path)

    async def _send(self, method: str, path: str) -> Any:
        url = self.resolve_url(path)
        logger.debug("Upstream request", method=method, url=str(url))

        try:
            response = await self._client.request(method, url)
        except httpx.TransportError as e:
            logger.error(
                "Upstream transport failure",
                method=method,
                url=str(url),
                error=str(e),
            )
            raise UpstreamTransportError(e, method=method, url=str(url)) from e

        if not response.is_success:
            logger.warning(
                "Upstream returned error status",
                method=method,
                url=str(url),
                status_code=response.status_code,
            )
            raise UpstreamHTTPError(
                response.status_code, response.text, method=method, url=str(url)
            )

        return self.parse_body(response)

    @staticmethod
    def parse_body(response: httpx.Response) -> Any:
        """Decode JSON bodies; anything else is returned as text."""
        if not response.content:
            return None
        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            return response.json()
        return response.text
