"""Relationship and RelationshipCollection nodes."""

from __future__ import annotations

from typing import Any

from jsonapi_client.exceptions import ValidationError
from jsonapi_client.factory import SHAPE_NODE_TYPES, NodeType
from jsonapi_client.nodes.base import Node
from jsonapi_client.shapes import DataShape, classify_data

__all__ = ["Relationship", "RelationshipCollection"]


class Relationship(Node):
    """A relationship object: at least one of ``links``, ``data``, ``meta``.

    ``data`` resolves to a resource identifier, an identifier collection, or
    null. The resolved shape is kept in ``data_shape`` before any member is
    parsed, so the ``links`` child can tell a to-many relationship apart.

    Attributes:
        data_shape: The DataShape of ``data``, or None when ``data`` is absent.
    """

    label = "Relationship"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.data_shape: DataShape | None = None

    def _parse(self, value: Any) -> None:
        self.data_shape = None
        obj = self._require_object(value)
        if not any(name in obj for name in ("links", "data", "meta")):
            raise ValidationError(
                "A Relationship object MUST contain at least one of the "
                "following properties: links, data, meta"
            )

        parsed: dict[str, Any] = {}
        if "data" in obj:
            self.data_shape = classify_data(obj["data"], identifiers_only=True)
            parsed["data"] = self._make(SHAPE_NODE_TYPES[self.data_shape], obj["data"])
        if "links" in obj:
            parsed["links"] = self._make(NodeType.RELATIONSHIP_LINK, obj["links"])
        if "meta" in obj:
            parsed["meta"] = self._make(NodeType.META, obj["meta"])

        self._publish(obj, parsed)


class RelationshipCollection(Node):
    """The ``relationships`` member: relationship name -> Relationship."""

    label = "Relationships"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        if "type" in obj or "id" in obj:
            raise ValidationError(
                'These properties are not allowed in relationships: "type", "id"'
            )
        for name, relationship in obj.items():
            self._store.set(name, self._make(NodeType.RELATIONSHIP, relationship))
