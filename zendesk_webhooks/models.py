"""Pydantic models for the Zendesk webhooks resource.

Field names match the JSON names used by the API, so models decode
server responses directly and ``model_dump(mode="json")`` produces
request bodies.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_validator,
    model_serializer,
)

# Webhook fields emitted even when empty; every other field is omitted.
ALWAYS_EMITTED_FIELDS = frozenset(
    {"endpoint", "http_method", "name", "request_format", "status"}
)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (str, list)) and not value


class ZendeskModel(BaseModel):
    """Base for response models.

    The API sends ``null`` for unset optional fields; those decode to the
    field default. Required fields still reject ``null``.
    """

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)


class WebhookAuthentication(ZendeskModel):
    """How outbound webhook requests authenticate themselves."""

    type: str = Field(default="", description="Authentication type tag")
    data: Any = Field(
        default=None, description="Credential payload, shape depends on type"
    )
    add_position: str = Field(
        default="", description="Where credentials are added (e.g. header)"
    )


class WebhookSigningSecret(ZendeskModel):
    """Server generated secret used to verify payload authenticity."""

    algorithm: str = Field(default="", description="Signing algorithm")
    secret: str = Field(default="", description="Secret value")


class Webhook(ZendeskModel):
    """A webhook registration.

    Built by the caller for create/update requests, where only the
    settable fields matter, or decoded from a server response, where the
    server owned fields (id, timestamps, actors) are populated too.
    """

    authentication: Optional[WebhookAuthentication] = None
    created_at: Optional[datetime] = None
    created_by: str = ""
    description: str = ""
    endpoint: str = ""
    external_source: Any = None
    http_method: str = ""
    id: str = ""
    name: str = ""
    request_format: str = ""
    signing_secret: Optional[WebhookSigningSecret] = None
    status: str = ""
    subscriptions: List[str] = Field(default_factory=list)
    updated_at: Optional[datetime] = None
    updated_by: str = ""

    @model_serializer(mode="wrap")
    def _omit_empty_fields(
        self, handler: SerializerFunctionWrapHandler
    ) -> Dict[str, Any]:
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if key in ALWAYS_EMITTED_FIELDS or not _is_empty(value)
        }


class PageOptions(BaseModel):
    """Offset pagination options shared by list endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    per_page: Optional[int] = None
    page: Optional[int] = None


class WebhookListOptions(PageOptions):
    """Filter and pagination options for listing webhooks.

    Python attribute names are used in code; aliases are the query
    parameter names sent to the API.
    """

    filter_name_contains: Optional[str] = Field(
        default=None, alias="filter[name_contains]"
    )
    filter_status: Optional[str] = Field(default=None, alias="filter[status]")
    page_after: Optional[str] = Field(default=None, alias="page[after]")
    page_before: Optional[str] = Field(default=None, alias="page[before]")
    page_size: Optional[int] = Field(default=None, alias="page[size]")
    sort: Optional[str] = None


class CursorPaginationMeta(ZendeskModel):
    """Cursor pagination state returned in the ``meta`` object."""

    has_more: bool = False
    after_cursor: Optional[str] = None
    before_cursor: Optional[str] = None


class CursorPaginationLinks(ZendeskModel):
    """Cursor pagination URLs returned in the ``links`` object."""

    prev: Optional[str] = None
    next: Optional[str] = None


class Page(ZendeskModel):
    """Pagination descriptor shared by list endpoints.

    Offset paginated responses fill ``previous_page``, ``next_page`` and
    ``count``; cursor paginated responses fill ``meta`` and ``links``.
    """

    previous_page: Optional[str] = None
    next_page: Optional[str] = None
    count: int = 0
    meta: Optional[CursorPaginationMeta] = None
    links: Optional[CursorPaginationLinks] = None

    def has_next(self) -> bool:
        """Whether another page follows this one."""
        if self.meta is not None and self.meta.has_more:
            return True
        return bool(self.next_page)


class WebhookEnvelope(BaseModel):
    """``{"webhook": {...}}`` request and response body."""

    webhook: Webhook


class WebhookListEnvelope(Page):
    """List response body: the webhooks array plus pagination fields."""

    webhooks: List[Webhook]

    def to_page(self) -> Page:
        return Page(**{name: getattr(self, name) for name in Page.model_fields})


class SigningSecretEnvelope(BaseModel):
    """``{"signing_secret": {...}}`` response body."""

    signing_secret: WebhookSigningSecret
