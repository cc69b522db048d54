"""Exception classes for the zendesk_webhooks client.

Every failure raised by a client operation is one of two kinds:

- TransportError: the HTTP round trip failed (connection error, timeout,
  or a non-2xx status from the server)
- DecodeError: the response body could not be decoded into the expected
  JSON shape
"""

from typing import Any, Dict, Mapping, Optional


class ZendeskError(Exception):
    """Base exception for all zendesk_webhooks errors.

    Attributes:
        message: Human readable error message
        details: Extra context about the failure
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary suitable for structured logs.

        Returns:
            Dictionary with the error type, message and details
        """
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidConfigurationError(ZendeskError):
    """Raised when a client cannot be built from the given configuration."""

    pass


class TransportError(ZendeskError):
    """Raised when an HTTP call fails or returns a non-success status.

    Attributes:
        operation: Client operation that issued the request
        resource_id: Webhook id the request targeted, if any
        status_code: HTTP status code, or None when no response arrived
        headers: Response headers, empty when no response arrived
        body: Raw response body, empty when no response arrived
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        resource_id: Optional[str] = None,
        status_code: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: bytes = b"",
    ):
        self.operation = operation
        self.resource_id = resource_id
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.body = body
        super().__init__(
            message,
            details={
                "operation": operation,
                "resource_id": resource_id,
                "status_code": status_code,
            },
        )

    @property
    def is_not_found(self) -> bool:
        """Whether the server answered 404 Not Found."""
        return self.status_code == 404

    def with_context(
        self, operation: str, resource_id: Optional[str] = None
    ) -> "TransportError":
        """Return a copy of this error labelled with the client operation.

        The caller is expected to chain the copy with ``raise ... from``.

        Args:
            operation: Client operation name (e.g. "get_webhook")
            resource_id: Webhook id targeted by the operation

        Returns:
            New TransportError carrying the same response data
        """
        target = f"{operation}({resource_id})" if resource_id else operation
        return TransportError(
            f"{target}: {self.message}",
            operation=operation,
            resource_id=resource_id,
            status_code=self.status_code,
            headers=self.headers,
            body=self.body,
        )


class DecodeError(ZendeskError):
    """Raised when a response body does not match the expected JSON shape.

    Attributes:
        operation: Client operation that received the body
        resource_id: Webhook id the request targeted, if any
        body: Raw response body that failed to decode
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        resource_id: Optional[str] = None,
        body: bytes = b"",
    ):
        self.operation = operation
        self.resource_id = resource_id
        self.body = body
        super().__init__(
            message,
            details={"operation": operation, "resource_id": resource_id},
        )
