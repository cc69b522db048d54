"""Type protocols for the webhooks client.

Code that only needs the webhook operations can depend on ``WebhookAPI``
and accept any implementation, including test doubles.
"""

from typing import List, Optional, Protocol, Tuple

from .models import Page, Webhook, WebhookListOptions, WebhookSigningSecret
from .transport import TimeoutTypes


class WebhookAPI(Protocol):
    """Operations available on the webhooks resource."""

    async def list_webhooks(
        self,
        options: Optional[WebhookListOptions] = None,
        *,
        timeout: Optional[TimeoutTypes] = None,
    ) -> Tuple[List[Webhook], Page]:
        ...

    async def create_webhook(
        self, hook: Webhook, *, timeout: Optional[TimeoutTypes] = None
    ) -> Webhook:
        ...

    async def get_webhook(
        self, webhook_id: str, *, timeout: Optional[TimeoutTypes] = None
    ) -> Webhook:
        ...

    async def update_webhook(
        self,
        webhook_id: str,
        hook: Webhook,
        *,
        timeout: Optional[TimeoutTypes] = None,
    ) -> None:
        ...

    async def delete_webhook(
        self, webhook_id: str, *, timeout: Optional[TimeoutTypes] = None
    ) -> None:
        ...

    async def get_webhook_signing_secret(
        self, webhook_id: str, *, timeout: Optional[TimeoutTypes] = None
    ) -> WebhookSigningSecret:
        ...
