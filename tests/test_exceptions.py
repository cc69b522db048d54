"""Test suite for exception classes."""

from zendesk_webhooks import DecodeError, TransportError, ZendeskError


class TestExceptions:
    """Test error attributes and structured output."""

    def test_hierarchy(self):
        """Test that both error kinds share the base class."""
        assert issubclass(TransportError, ZendeskError)
        assert issubclass(DecodeError, ZendeskError)

    def test_to_dict(self):
        """Test the structured form of an error."""
        error = TransportError(
            "GET /webhooks/1 returned 404",
            operation="get_webhook",
            resource_id="1",
            status_code=404,
        )

        assert error.to_dict() == {
            "error_type": "TransportError",
            "message": "GET /webhooks/1 returned 404",
            "details": {
                "operation": "get_webhook",
                "resource_id": "1",
                "status_code": 404,
            },
        }

    def test_with_context_keeps_response(self):
        """Test that labelling an error keeps the response data."""
        error = TransportError(
            "DELETE /webhooks/1 returned 404",
            status_code=404,
            headers={"x-request-id": "r1"},
            body=b"{}",
        )

        labelled = error.with_context("delete_webhook", "1")

        assert str(labelled) == "delete_webhook(1): DELETE /webhooks/1 returned 404"
        assert labelled.status_code == 404
        assert labelled.headers == {"x-request-id": "r1"}
        assert labelled.body == b"{}"
        assert labelled.is_not_found

    def test_with_context_without_id(self):
        """Test labelling an error for an operation without a webhook id."""
        labelled = TransportError("boom").with_context("list_webhooks")

        assert str(labelled) == "list_webhooks: boom"
        assert labelled.resource_id is None
        assert labelled.status_code is None
