"""Tests for dotted-path navigation (AccessMixin).

Covers:
- has() descends through documents, collections, relationships and meta
- has() returns False (never raises) for any broken chain or key type
- get() returns nested values and raises AccessError naming the failing key
- Numeric string segments address collection positions
- as_plain() with and without recursion
"""

from __future__ import annotations

from typing import Any

import pytest

from jsonapi_client import AccessError, Accessible, Manager
from jsonapi_client.access import split_path

DOCUMENT: dict[str, Any] = {
    "data": [
        {
            "type": "articles",
            "id": "1",
            "attributes": {"title": "Hello", "tags": {"primary": "news"}},
            "relationships": {
                "comments": {
                    "links": {"related": "http://example.com/articles/1/comments"},
                    "meta": {"foo": "bar"},
                }
            },
        }
    ]
}


@pytest.fixture
def document(manager: Manager) -> Any:
    return manager.parse(DOCUMENT)


class TestSplitPath:
    def test_string_path(self) -> None:
        assert split_path("data.0.type") == ["data", "0", "type"]

    def test_integer_path(self) -> None:
        assert split_path(3) == [3]

    @pytest.mark.parametrize("path", [None, True, 1.0, {}, [], object()])
    def test_unusable_paths(self, path: object) -> None:
        assert split_path(path) is None


class TestHas:
    def test_full_chain(self, document: Any) -> None:
        assert document.has("data.0.relationships.comments.meta.foo") is True

    def test_each_prefix_resolves(self, document: Any) -> None:
        path = "data.0.relationships.comments.meta.foo"
        segments = path.split(".")
        for end in range(1, len(segments) + 1):
            assert document.has(".".join(segments[:end])), segments[:end]

    def test_missing_leaf(self, document: Any) -> None:
        assert document.has("data.0.relationships.comments.meta.baz") is False

    def test_missing_intermediate(self, document: Any) -> None:
        assert document.has("data.1.type") is False

    def test_cannot_descend_into_scalar(self, document: Any) -> None:
        assert document.has("data.0.type.length") is False

    def test_plain_dict_values_are_leaves(self, document: Any) -> None:
        assert document.has("data.0.attributes.tags") is True
        assert document.has("data.0.attributes.tags.primary") is False

    @pytest.mark.parametrize("key", [{}, [], None, 1.5, object(), True, "", "data."])
    def test_never_raises(self, document: Any, key: object) -> None:
        assert document.has(key) is False

    def test_integer_key_on_collection(self, document: Any) -> None:
        collection = document.get("data")
        assert collection.has(0) is True
        assert collection.has("0") is True
        assert collection.has(1) is False
        assert collection.has("-1") is False


class TestGet:
    def test_nested_value(self, document: Any) -> None:
        assert document.get("data.0.relationships.comments.meta.foo") == "bar"
        assert document.get("data.0.attributes.tags") == {"primary": "news"}

    def test_integer_and_string_index_agree(self, document: Any) -> None:
        collection = document.get("data")
        assert collection.get(0) is collection.get("0")

    def test_missing_key_names_only_that_key(self, document: Any) -> None:
        with pytest.raises(AccessError) as exc_info:
            document.get("data.0.relationships.comments.meta.baz")
        assert str(exc_info.value) == '"baz" doesn\'t exist in this object.'

    def test_missing_resource_member(self, document: Any) -> None:
        with pytest.raises(AccessError, match=r'"something" doesn\'t exist in this resource\.'):
            document.get("data.0.something")

    def test_missing_collection_position(self, document: Any) -> None:
        with pytest.raises(AccessError, match=r'"5" doesn\'t exist in this resource\.'):
            document.get("data.5")

    def test_missing_document_member(self, document: Any) -> None:
        with pytest.raises(AccessError, match=r'"errors" doesn\'t exist in this document\.'):
            document.get("errors")

    def test_descending_into_scalar(self, document: Any) -> None:
        with pytest.raises(AccessError, match=r'"length" doesn\'t exist in "type"\.'):
            document.get("data.0.type.length")

    @pytest.mark.parametrize("key", [{}, [], None, 1.5])
    def test_unusable_key_types(self, document: Any, key: object) -> None:
        with pytest.raises(AccessError):
            document.get(key)


class TestKeysAndPlain:
    def test_get_keys(self, document: Any) -> None:
        assert document.get_keys() == ["data"]
        assert document.get("data").get_keys() == [0]
        assert document.get("data.0").get_keys() == ["type", "id", "attributes", "relationships"]

    def test_as_plain_non_recursive_keeps_nodes(self, document: Any) -> None:
        plain = document.as_plain()
        assert plain["data"] is document.get("data")
        assert isinstance(plain["data"], Accessible)

    def test_collection_as_plain_is_a_list(self, document: Any) -> None:
        collection = document.get("data")
        assert collection.as_plain() == [collection.get(0)]

    def test_as_plain_recursive(self, document: Any) -> None:
        assert document.as_plain(recursive=True) == DOCUMENT
