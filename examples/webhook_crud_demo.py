"""
Demonstrates the webhook lifecycle against a Zendesk account.
Reads connection settings from ZENDESK_* environment variables.
"""

import asyncio

from zendesk_webhooks import (
    TransportError,
    Webhook,
    WebhookClient,
    WebhookListOptions,
)


async def webhook_crud():
    """Create, inspect, update, list and delete a webhook"""

    async with WebhookClient.from_config() as client:
        # CREATE
        print("\n📝 CREATE:")
        hook = await client.create_webhook(
            Webhook(
                name="Demo ticket events",
                endpoint="https://example.com/zendesk-hook",
                http_method="POST",
                request_format="json",
                status="active",
                subscriptions=["conditional_ticket_events"],
            )
        )
        print(f"Created webhook: {hook.name} ({hook.id})")

        # READ
        secret = await client.get_webhook_signing_secret(hook.id)
        print(f"Signing algorithm: {secret.algorithm}")

        # UPDATE
        # Only settable fields go back; id, timestamps and actors stay server-side
        update = hook.model_copy(
            update={
                "id": "",
                "created_at": None,
                "created_by": "",
                "updated_at": None,
                "updated_by": "",
                "signing_secret": None,
                "status": "inactive",
            }
        )
        await client.update_webhook(hook.id, update)
        print(f"Disabled webhook {hook.id}")

        # LIST, one page at a time
        print("\n📋 LIST:")
        options = WebhookListOptions(filter_name_contains="Demo", page_size=10)
        while True:
            hooks, page = await client.list_webhooks(options)
            for item in hooks:
                print(f"- {item.name} [{item.status}]")
            if not page.has_next() or page.meta is None:
                break
            options = options.model_copy(update={"page_after": page.meta.after_cursor})

        # DELETE
        await client.delete_webhook(hook.id)
        try:
            await client.get_webhook(hook.id)
        except TransportError as e:
            print(f"\n🗑️  Deleted webhook is gone: {e.is_not_found}")


if __name__ == "__main__":
    asyncio.run(webhook_crud())
