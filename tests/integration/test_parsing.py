"""End-to-end parsing of the example documents in ``tests/fixtures``.

Covers:
- Round trip: ``as_plain(recursive=True)`` reproduces the decoded input
- Key order is preserved at every level
- Dotted path navigation into nested nodes
- Request documents without a primary ``id``
- Scalar ``type``/``id`` coercion
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from jsonapi_client import (
    AccessError,
    Manager,
    StringInput,
    ValidationError,
    ValueInput,
    parse_request_body,
    parse_response_body,
)
from jsonapi_client.nodes import (
    Document,
    Link,
    Meta,
    ResourceCollection,
    ResourceIdentifier,
    ResourceItem,
)

RESPONSE_FIXTURES = [
    "01_simple_resource.json",
    "02_simple_resource_identifier.json",
    "03_resource_object.json",
    "04_complete_document_with_multiple_relationships.json",
    "05_error_document.json",
    "06_pagination_example.json",
    "07_relationship_example_without_data.json",
    "08_object_links.json",
    "10_meta_only.json",
    "11_resource_identifier_with_meta.json",
    "12_null_resource.json",
    "13_collection_with_resource_identifier_with_meta.json",
    "17_relationship_links.json",
]

REQUEST_FIXTURES = [
    "14_create_resource_without_id.json",
    "15_create_resource_without_id.json",
]


class TestRoundTrip:
    @pytest.mark.parametrize("name", RESPONSE_FIXTURES)
    def test_response_fixture(
        self,
        manager: Manager,
        name: str,
        fixture_value: Callable[[str], Any],
        same_order: Callable[[Any, Any], None],
    ) -> None:
        expected = fixture_value(name)
        document = manager.parse(expected)
        assert isinstance(document, Document)
        plain = document.as_plain(recursive=True)
        assert plain == expected
        same_order(plain, expected)

    @pytest.mark.parametrize("name", RESPONSE_FIXTURES)
    def test_response_fixture_from_text(
        self, name: str, fixture_text: Callable[[str], str], fixture_value: Callable[[str], Any]
    ) -> None:
        document = parse_response_body(fixture_text(name))
        assert document.as_plain(recursive=True) == fixture_value(name)

    @pytest.mark.parametrize("name", REQUEST_FIXTURES)
    def test_request_fixture(
        self, name: str, fixture_value: Callable[[str], Any], same_order: Callable[[Any, Any], None]
    ) -> None:
        expected = fixture_value(name)
        plain = parse_request_body(expected).as_plain(recursive=True)
        assert plain == expected
        same_order(plain, expected)

    @pytest.mark.parametrize("name", REQUEST_FIXTURES)
    def test_request_fixture_rejected_as_response(
        self, name: str, fixture_value: Callable[[str], Any]
    ) -> None:
        with pytest.raises(ValidationError, match="A resource object MUST contain an id"):
            parse_response_body(fixture_value(name))

    def test_shallow_as_plain_keeps_nodes(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        plain = manager.parse(fixture_value("03_resource_object.json")).as_plain()
        assert list(plain) == ["data"]
        assert isinstance(plain["data"], ResourceItem)


class TestCoercion:
    def test_integer_type_and_id(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        document = manager.parse(fixture_value("16_type_and_id_as_integer.json"))
        assert document.get("data.type") == "1"
        assert document.get("data.id") == "2"
        assert document.as_plain(recursive=True) == {
            "data": {"type": "1", "id": "2", "attributes": {"title": "Integer type and id"}}
        }


class TestNavigation:
    def test_compound_document(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        document = manager.parse(
            fixture_value("04_complete_document_with_multiple_relationships.json")
        )
        assert document.get_keys() == ["data", "included"]
        assert isinstance(document.get("data"), ResourceCollection)
        assert document.get("data.0.relationships.comments.data.1.id") == "12"
        assert document.get("included.0.attributes.first-name") == "Dan"
        assert document.get("data").get(0) is document.get("data.0")
        assert document.has("included.3") is False
        assert document.has("data.0.relationships.author.data.type") is True

    def test_relationship_without_data(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        document = manager.parse(fixture_value("07_relationship_example_without_data.json"))
        comments = document.get("data.0.relationships.comments")
        assert comments.get_keys() == ["links", "meta"]
        assert comments.get("links").get_keys() == [
            "custom", "self", "first", "last", "prev", "next", "related",
        ]
        related = document.get("data.0.relationships.comments.links.related")
        assert isinstance(related, Link)
        assert related.get("meta.count") == 10
        assert document.has("data.0.relationships.comments.data") is False

    def test_object_links(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        document = manager.parse(fixture_value("08_object_links.json"))
        assert document.get_keys() == ["links", "data", "jsonapi"]
        assert document.get("links.next.href") == "?page[number]=2&page[size]=10"
        assert len(document.get("data")) == 0
        assert document.get("jsonapi.version") == "1.0"
        assert isinstance(document.get("jsonapi.meta"), Meta)

    def test_mixed_collection(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        document = manager.parse(
            fixture_value("13_collection_with_resource_identifier_with_meta.json")
        )
        assert type(document.get("data.0")) is ResourceIdentifier
        assert document.get("data.1.meta.foo") == "bar"

    def test_error_document(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        document = manager.parse(fixture_value("05_error_document.json"))
        assert document.get("errors.0.source.pointer") == "/data/attributes/first-name"
        assert document.get("errors.1.links.about") == "http://example.com/errors/2"
        assert document.get("errors.1.meta.retry") is False

    def test_missing_paths(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        document = manager.parse(fixture_value("02_simple_resource_identifier.json"))
        with pytest.raises(AccessError, match='"meta" doesn\'t exist in this resource.'):
            document.get("data.meta")
        with pytest.raises(AccessError, match='"id" doesn\'t exist in "type".'):
            document.get("data.type.id")
        with pytest.raises(AccessError, match='"included" doesn\'t exist in this document.'):
            document.get("included")
        assert document.has("data.type.id") is False
        assert document.has(None) is False
        assert document.has(["data"]) is False


class TestInputAdapters:
    def test_string_input(self, manager: Manager, fixture_text: Callable[[str], str]) -> None:
        document = manager.parse(StringInput(fixture_text("12_null_resource.json")))
        assert document.get("data").as_plain() is None

    def test_bytes_input(self, manager: Manager, fixture_text: Callable[[str], str]) -> None:
        text = fixture_text("02_simple_resource_identifier.json").encode("utf-8")
        assert manager.parse(StringInput(text)).get("data.id") == "1"

    def test_value_input(self, manager: Manager, fixture_value: Callable[[str], Any]) -> None:
        document = manager.parse(ValueInput(fixture_value("10_meta_only.json")))
        assert document.get("meta.stats") == {
            "requests": 12, "ratio": 0.5, "cached": True, "next": None,
        }
