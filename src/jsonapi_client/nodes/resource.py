"""Resource nodes: identifiers, full resource objects, null, and collections.

Which of these a raw value becomes is decided by ``jsonapi_client.shapes``
before the node is built; the nodes here only validate members.
"""

from __future__ import annotations

from typing import Any

from jsonapi_client.exceptions import ValidationError
from jsonapi_client.factory import SHAPE_NODE_TYPES, NodeType
from jsonapi_client.nodes.base import CollectionNode, Node
from jsonapi_client.shapes import DataShape, classify_resource, json_kind, to_string

__all__ = [
    "ResourceCollection",
    "ResourceIdentifier",
    "ResourceIdentifierCollection",
    "ResourceItem",
    "ResourceNull",
]


class ResourceNull(Node):
    """An explicit ``"data": null``. Has no keys; ``as_plain`` returns None."""

    label = "Resource"
    context = "resource"

    def _parse(self, value: Any) -> None:
        if value is not None:
            msg = f'Data value has to be null, "{json_kind(value)}" given.'
            raise ValidationError(msg)

    def as_plain(self, recursive: bool = False) -> None:
        return None


class ResourceIdentifier(Node):
    """A resource identifier object: ``type``, ``id`` and optional ``meta``.

    ``type`` and ``id`` are mandatory. They must be scalars and are exposed as
    strings (``789`` becomes ``"789"``). ``id`` may be omitted when the
    manager's ``optional_item_id`` toggle is set and this node is the
    document's primary data.
    """

    label = "Resource"
    context = "resource"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        parsed = self._parse_identity(obj)
        if "meta" in obj:
            parsed["meta"] = self._make(NodeType.META, obj["meta"])
        self._publish(obj, parsed)

    def _parse_identity(self, obj: dict[str, Any]) -> dict[str, Any]:
        if "type" not in obj:
            raise ValidationError("A resource object MUST contain a type")
        if "id" not in obj and not self._id_optional():
            raise ValidationError("A resource object MUST contain an id")

        parsed: dict[str, Any] = {}
        for name in ("type", "id"):
            if name not in obj:
                continue
            if isinstance(obj[name], (dict, list)):
                raise ValidationError(f"Resource {name} cannot be an array or object")
            parsed[name] = to_string(obj[name])
        return parsed

    def _id_optional(self) -> bool:
        return bool(self.manager.get_config("optional_item_id")) and self.is_primary_data()


class ResourceItem(ResourceIdentifier):
    """A resource object: identifier members plus attributes, relationships, links.

    Attributes and relationships share one namespace: a relationship may not
    reuse the name of an attribute.
    """

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        parsed = self._parse_identity(obj)

        if "meta" in obj:
            parsed["meta"] = self._make(NodeType.META, obj["meta"])
        if "attributes" in obj:
            parsed["attributes"] = self._make(NodeType.ATTRIBUTES, obj["attributes"])
        if "relationships" in obj:
            parsed["relationships"] = self._make(
                NodeType.RELATIONSHIP_COLLECTION, obj["relationships"]
            )
        if "links" in obj:
            parsed["links"] = self._make(NodeType.RESOURCE_ITEM_LINK, obj["links"])

        if "attributes" in parsed and "relationships" in parsed:
            attribute_names = set(parsed["attributes"].get_keys())
            for name in parsed["relationships"].get_keys():
                if name in attribute_names:
                    raise ValidationError(
                        f'"{name}" property cannot be set because it exists '
                        "already in parents Resource object."
                    )

        self._publish(obj, parsed)


class ResourceIdentifierCollection(CollectionNode):
    """An array of resource identifiers (relationship ``data``)."""

    label = "Resources"

    def _parse(self, value: Any) -> None:
        _require_array(value)
        for index, element in enumerate(value):
            _require_element_object(element)
            self._store.set(index, self._make(NodeType.RESOURCE_IDENTIFIER, element))


class ResourceCollection(CollectionNode):
    """An array of resources (document ``data`` or ``included``).

    Each element is classified on its own, so one collection may hold both
    resource identifiers and full resource objects.
    """

    label = "Resources"

    def _parse(self, value: Any) -> None:
        _require_array(value)
        for index, element in enumerate(value):
            _require_element_object(element)
            shape: DataShape = classify_resource(element)
            self._store.set(index, self._make(SHAPE_NODE_TYPES[shape], element))


def _require_array(value: Any) -> None:
    if not isinstance(value, list):
        msg = f'Resources for a collection has to be in an array, "{json_kind(value)}" given.'
        raise ValidationError(msg)


def _require_element_object(element: Any) -> None:
    if not isinstance(element, dict):
        msg = f'Resources inside a collection MUST be objects, "{json_kind(element)}" given.'
        raise ValidationError(msg)
