"""Test suite for query string encoding."""

from urllib.parse import parse_qsl, urlsplit

import pytest

from zendesk_webhooks import (
    PageOptions,
    WebhookListOptions,
    add_options,
    encode_options,
)


class TestEncodeOptions:
    """Test encode_options."""

    def test_none_options(self):
        """Test that no options encode to nothing."""
        assert encode_options(None) == []

    def test_empty_options(self):
        """Test that an options object with no values encodes to nothing."""
        assert encode_options(WebhookListOptions()) == []

    def test_all_webhook_options(self):
        """Test that every option uses its documented parameter name."""
        options = WebhookListOptions(
            filter_name_contains="ticket",
            filter_status="active",
            page_after="after",
            page_before="before",
            page_size=50,
            sort="-name",
        )

        assert encode_options(options) == [
            ("filter[name_contains]", "ticket"),
            ("filter[status]", "active"),
            ("page[after]", "after"),
            ("page[before]", "before"),
            ("page[size]", "50"),
            ("sort", "-name"),
        ]

    @pytest.mark.parametrize(
        "values, expected",
        [
            ({"filter_status": "inactive"}, [("filter[status]", "inactive")]),
            ({"filter_status": "", "sort": "name"}, [("sort", "name")]),
            ({"page_size": 0, "page_before": "b"}, [("page[before]", "b")]),
            ({"per_page": 10, "page": 2}, [("per_page", "10"), ("page", "2")]),
        ],
    )
    def test_only_non_empty_fields(self, values, expected):
        """Test that empty values are left out."""
        assert encode_options(WebhookListOptions(**values)) == expected

    def test_options_by_alias(self):
        """Test that options can be built from query parameter names."""
        options = WebhookListOptions.model_validate({"filter[status]": "active"})

        assert encode_options(options) == [("filter[status]", "active")]

    def test_list_values_repeat_key(self):
        """Test that list values produce one pair per element."""

        class TaggedOptions(PageOptions):
            tags: list = []

        assert encode_options(TaggedOptions(tags=["a", "b"])) == [
            ("tags", "a"),
            ("tags", "b"),
        ]


class TestAddOptions:
    """Test add_options."""

    def test_path_unchanged_without_options(self):
        """Test that the path is returned as-is when nothing is set."""
        assert add_options("/webhooks", None) == "/webhooks"
        assert add_options("/webhooks", WebhookListOptions()) == "/webhooks"

    def test_appends_encoded_query(self):
        """Test that brackets are percent-encoded and values decode back."""
        url = add_options(
            "/webhooks",
            WebhookListOptions(filter_name_contains="a b", page_size=5),
        )

        assert url == "/webhooks?filter%5Bname_contains%5D=a+b&page%5Bsize%5D=5"
        assert parse_qsl(urlsplit(url).query) == [
            ("filter[name_contains]", "a b"),
            ("page[size]", "5"),
        ]

    def test_extends_existing_query(self):
        """Test that options are appended to an existing query string."""
        url = add_options("/webhooks?include=x", WebhookListOptions(sort="name"))

        assert url == "/webhooks?include=x&sort=name"
