"""
zendesk_webhooks - Async client for the Zendesk webhooks API.

Typed Pydantic models for webhook registrations and a client mapping
each webhook operation to a single HTTP call.

Main Exports:
    Client:
        - WebhookClient: list, create, get, update, delete webhooks and
          fetch their signing secrets
        - WebhookAPI: Protocol implemented by WebhookClient
        - HTTPTransport: Authenticated JSON transport over httpx
        - ClientConfig: Connection settings (explicit or ZENDESK_* env vars)

    Models:
        - Webhook, WebhookAuthentication, WebhookSigningSecret
        - WebhookListOptions, PageOptions, Page

    Errors:
        - ZendeskError, TransportError, DecodeError, InvalidConfigurationError

Example:
    >>> from zendesk_webhooks import ClientConfig, Webhook, WebhookClient
    >>>
    >>> config = ClientConfig(subdomain="acme", email="a@acme.com", api_token="...")
    >>> async with WebhookClient.from_config(config) as client:
    ...     hook = await client.create_webhook(
    ...         Webhook(
    ...             name="Ticket events",
    ...             endpoint="https://example.com/hook",
    ...             http_method="POST",
    ...             request_format="json",
    ...             status="active",
    ...             subscriptions=["conditional_ticket_events"],
    ...         )
    ...     )
"""

__version__ = "0.1.0"

from .client import WebhookClient
from .config import ClientConfig
from .credentials import BearerTokenAuth, api_token_auth, password_auth
from .exceptions import (
    DecodeError,
    InvalidConfigurationError,
    TransportError,
    ZendeskError,
)
from .models import (
    CursorPaginationLinks,
    CursorPaginationMeta,
    Page,
    PageOptions,
    Webhook,
    WebhookAuthentication,
    WebhookListOptions,
    WebhookSigningSecret,
)
from .protocols import WebhookAPI
from .query import add_options, encode_options
from .transport import HTTPTransport

__all__ = [
    # Version
    "__version__",
    # Client
    "WebhookClient",
    "WebhookAPI",
    "HTTPTransport",
    "ClientConfig",
    # Credentials
    "BearerTokenAuth",
    "api_token_auth",
    "password_auth",
    # Models
    "Webhook",
    "WebhookAuthentication",
    "WebhookSigningSecret",
    "WebhookListOptions",
    "PageOptions",
    "Page",
    "CursorPaginationMeta",
    "CursorPaginationLinks",
    # Query encoding
    "add_options",
    "encode_options",
    # Errors
    "ZendeskError",
    "TransportError",
    "DecodeError",
    "InvalidConfigurationError",
]
