"""Client for the Zendesk webhooks resource.

Each operation issues exactly one HTTP request:

    list_webhooks               GET     /webhooks?<options>
    create_webhook              POST    /webhooks
    get_webhook                 GET     /webhooks/{id}
    update_webhook              PUT     /webhooks/{id}
    delete_webhook              DELETE  /webhooks/{id}
    get_webhook_signing_secret  GET     /webhooks/{id}/signing_secret

API reference:
https://developer.zendesk.com/api-reference/webhooks/webhooks-api/webhooks/
"""

import logging
from typing import Any, Awaitable, List, Optional, Tuple, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from .config import ClientConfig
from .exceptions import DecodeError, TransportError
from .models import (
    Page,
    SigningSecretEnvelope,
    Webhook,
    WebhookEnvelope,
    WebhookListEnvelope,
    WebhookListOptions,
    WebhookSigningSecret,
)
from .query import add_options
from .transport import HTTPTransport, TimeoutTypes

logger = logging.getLogger(__name__)

WEBHOOKS_PATH = "/webhooks"

EnvelopeT = TypeVar("EnvelopeT", bound=BaseModel)


class WebhookClient:
    """Typed binding for the ``/webhooks`` resource family.

    The client holds no per-call state, so one instance can serve any
    number of concurrent tasks. Failures surface as ``TransportError`` or
    ``DecodeError``; nothing is retried.

    Example:
        >>> async with WebhookClient.from_config() as client:
        ...     hooks, page = await client.list_webhooks(
        ...         WebhookListOptions(filter_status="enabled")
        ...     )
    """

    def __init__(self, transport: HTTPTransport, owns_transport: bool = False):
        """Initialize the client.

        Args:
            transport: Transport used for every request
            owns_transport: Close the transport when the client is closed
        """
        self._transport = transport
        self._owns_transport = owns_transport

    @classmethod
    def from_config(cls, config: Optional[ClientConfig] = None) -> "WebhookClient":
        """Create a client that owns its transport.

        Args:
            config: Connection settings; read from the environment when None

        Raises:
            InvalidConfigurationError: If the base URL or credentials are missing
        """
        if config is None:
            config = ClientConfig.from_env()
        config.apply_log_level()
        return cls(HTTPTransport.from_config(config), owns_transport=True)

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "WebhookClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def list_webhooks(
        self,
        options: Optional[WebhookListOptions] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Tuple[List[Webhook], Page]:
        """List one page of webhooks.

        Args:
            options: Filters and pagination; no filters when None
            timeout: Per-request timeout passed to the transport

        Returns:
            The webhooks on this page and the page descriptor. Pass the
            page cursors back through ``options`` to fetch more.
        """
        path = add_options(WEBHOOKS_PATH, options or WebhookListOptions())
        body = await self._send(
            "list_webhooks", None, self._transport.get(path, timeout=timeout)
        )
        envelope = self._decode(WebhookListEnvelope, body, "list_webhooks")
        return envelope.webhooks, envelope.to_page()

    async def create_webhook(
        self, hook: Webhook, *, timeout: Optional[TimeoutTypes] = None
    ) -> Webhook:
        """Create a webhook.

        The server validates the payload; name, endpoint, http_method,
        request_format and status are expected to be set.

        Returns:
            The created webhook with its server-assigned fields
        """
        body = await self._send(
            "create_webhook",
            None,
            self._transport.post(WEBHOOKS_PATH, self._wrap(hook), timeout=timeout),
        )
        return self._decode(WebhookEnvelope, body, "create_webhook").webhook

    async def get_webhook(
        self, webhook_id: str, *, timeout: Optional[TimeoutTypes] = None
    ) -> Webhook:
        """Fetch a webhook by id.

        Raises:
            TransportError: ``status_code`` is 404 when the webhook does not exist
        """
        body = await self._send(
            "get_webhook",
            webhook_id,
            self._transport.get(self._webhook_path(webhook_id), timeout=timeout),
        )
        return self._decode(WebhookEnvelope, body, "get_webhook", webhook_id).webhook

    async def update_webhook(
        self,
        webhook_id: str,
        hook: Webhook,
        *,
        timeout: Optional[TimeoutTypes] = None,
    ) -> None:
        """Replace a webhook's settable fields. The response body is ignored."""
        await self._send(
            "update_webhook",
            webhook_id,
            self._transport.put(
                self._webhook_path(webhook_id), self._wrap(hook), timeout=timeout
            ),
        )

    async def delete_webhook(
        self, webhook_id: str, *, timeout: Optional[TimeoutTypes] = None
    ) -> None:
        await self._send(
            "delete_webhook",
            webhook_id,
            self._transport.delete(self._webhook_path(webhook_id), timeout=timeout),
        )

    async def get_webhook_signing_secret(
        self, webhook_id: str, *, timeout: Optional[TimeoutTypes] = None
    ) -> WebhookSigningSecret:
        """Fetch the secret receivers use to verify webhook payloads."""
        path = self._webhook_path(webhook_id, "signing_secret")
        body = await self._send(
            "get_webhook_signing_secret",
            webhook_id,
            self._transport.get(path, timeout=timeout),
        )
        envelope = self._decode(
            SigningSecretEnvelope, body, "get_webhook_signing_secret", webhook_id
        )
        return envelope.signing_secret

    @staticmethod
    def _webhook_path(webhook_id: str, suffix: str = "") -> str:
        path = f"{WEBHOOKS_PATH}/{quote(webhook_id, safe='')}"
        return f"{path}/{suffix}" if suffix else path

    @staticmethod
    def _wrap(hook: Webhook) -> Any:
        return WebhookEnvelope(webhook=hook).model_dump(mode="json")

    @staticmethod
    async def _send(
        operation: str, webhook_id: Optional[str], request: Awaitable[bytes]
    ) -> bytes:
        try:
            return await request
        except TransportError as e:
            raise e.with_context(operation, webhook_id) from e

    @staticmethod
    def _decode(
        model: Type[EnvelopeT],
        body: bytes,
        operation: str,
        webhook_id: Optional[str] = None,
    ) -> EnvelopeT:
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            logger.warning(f"{operation}: unexpected response body: {e}")
            raise DecodeError(
                f"{operation}: response does not match {model.__name__}: {e}",
                operation=operation,
                resource_id=webhook_id,
                body=body,
            ) from e
