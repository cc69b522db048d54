"""Async HTTP transport for the Zendesk REST API.

The transport knows nothing about webhooks: it sends JSON requests to
paths relative to the API base URL and returns raw response bytes.
Connection failures, timeouts and non-2xx statuses are raised as
``TransportError``.
"""

import logging
from typing import Any, Dict, Optional, Union

import httpx

from .config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig
from .exceptions import TransportError

logger = logging.getLogger(__name__)

TimeoutTypes = Union[float, httpx.Timeout]


class HTTPTransport:
    """Authenticated JSON transport built on ``httpx.AsyncClient``.

    A transport may share an existing ``httpx.AsyncClient``; it only
    closes clients it created itself. Safe for concurrent use.

    Example:
        >>> async with HTTPTransport("https://acme.zendesk.com/api/v2") as t:
        ...     body = await t.get("/webhooks")
    """

    def __init__(
        self,
        base_url: str,
        auth: Optional[httpx.Auth] = None,
        timeout: TimeoutTypes = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the transport.

        Args:
            base_url: API base URL, e.g. ``https://acme.zendesk.com/api/v2``
            auth: Credential strategy attached to every request
            timeout: Default timeout for clients created by the transport
            user_agent: User-Agent header value
            client: Existing client to send requests with
        """
        self.base_url = base_url.rstrip("/")
        self._auth = auth
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(
        cls, config: ClientConfig, client: Optional[httpx.AsyncClient] = None
    ) -> "HTTPTransport":
        """Create a transport from a ClientConfig."""
        return cls(
            base_url=config.resolve_base_url(),
            auth=config.build_auth(),
            timeout=config.timeout,
            user_agent=config.user_agent,
            client=client,
        )

    async def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        timeout: Optional[TimeoutTypes] = None,
    ) -> bytes:
        """Send a request and return the raw response body.

        Args:
            method: HTTP verb
            path: Path relative to the base URL, including any query string
            data: JSON serializable request body, or None for no body
            timeout: Per-request timeout; the client default applies when None

        Returns:
            Response body bytes

        Raises:
            TransportError: On connection failure, timeout or non-2xx status
        """
        kwargs: Dict[str, Any] = {"headers": self._headers}
        if data is not None:
            kwargs["json"] = data
        if self._auth is not None:
            kwargs["auth"] = self._auth
        if timeout is not None:
            kwargs["timeout"] = timeout

        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        body = response.content
        if not response.is_success:
            if response.status_code >= 500:
                logger.error(f"{method} {path} returned {response.status_code}")
            else:
                logger.warning(f"{method} {path} returned {response.status_code}")
            raise TransportError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                headers=response.headers,
                body=body,
            )

        logger.debug(f"{method} {path} returned {response.status_code}")
        return body

    async def get(self, path: str, timeout: Optional[TimeoutTypes] = None) -> bytes:
        return await self.request("GET", path, timeout=timeout)

    async def post(
        self, path: str, data: Any, timeout: Optional[TimeoutTypes] = None
    ) -> bytes:
        return await self.request("POST", path, data=data, timeout=timeout)

    async def put(
        self, path: str, data: Any, timeout: Optional[TimeoutTypes] = None
    ) -> bytes:
        return await self.request("PUT", path, data=data, timeout=timeout)

    async def delete(
        self, path: str, timeout: Optional[TimeoutTypes] = None
    ) -> bytes:
        return await self.request("DELETE", path, timeout=timeout)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HTTPTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
