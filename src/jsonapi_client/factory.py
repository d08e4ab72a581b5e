"""Factory: maps node type names to node constructors.

The default registry covers every ``NodeType``. Callers may pass overrides to
replace a built-in node class or to register extra names, without touching
the engine::

    class StrictMeta(Meta):
        ...

    factory = Factory({NodeType.META: StrictMeta})
    manager = Manager(factory=factory)

The registry is built once in ``__init__`` and exposed read-only, so one
factory can be shared by managers running in different threads.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from jsonapi_client.exceptions import FactoryError
from jsonapi_client.shapes import DataShape

__all__ = ["SHAPE_NODE_TYPES", "Factory", "NodeType"]

Constructor = Callable[..., Any]


class NodeType(StrEnum):
    """Registered names of the built-in node types."""

    DOCUMENT = "Document"
    RESOURCE_NULL = "ResourceNull"
    RESOURCE_IDENTIFIER = "ResourceIdentifier"
    RESOURCE_ITEM = "ResourceItem"
    RESOURCE_IDENTIFIER_COLLECTION = "ResourceIdentifierCollection"
    RESOURCE_COLLECTION = "ResourceCollection"
    ATTRIBUTES = "Attributes"
    RELATIONSHIP = "Relationship"
    RELATIONSHIP_COLLECTION = "RelationshipCollection"
    META = "Meta"
    JSONAPI = "Jsonapi"
    PAGINATION = "Pagination"
    LINK = "Link"
    DOCUMENT_LINK = "DocumentLink"
    RESOURCE_ITEM_LINK = "ResourceItemLink"
    RELATIONSHIP_LINK = "RelationshipLink"
    ERROR_LINK = "ErrorLink"
    ERROR = "Error"
    ERROR_COLLECTION = "ErrorCollection"
    ERROR_SOURCE = "ErrorSource"


# Node type built for each classified ``data`` shape.
SHAPE_NODE_TYPES: Mapping[DataShape, NodeType] = MappingProxyType(
    {
        DataShape.NULL: NodeType.RESOURCE_NULL,
        DataShape.IDENTIFIER: NodeType.RESOURCE_IDENTIFIER,
        DataShape.ITEM: NodeType.RESOURCE_ITEM,
        DataShape.IDENTIFIER_COLLECTION: NodeType.RESOURCE_IDENTIFIER_COLLECTION,
        DataShape.RESOURCE_COLLECTION: NodeType.RESOURCE_COLLECTION,
    }
)


def _default_registry() -> dict[str, Constructor]:
    # Imported here: node modules import NodeType from this module.
    from jsonapi_client import nodes

    return {
        NodeType.DOCUMENT: nodes.Document,
        NodeType.RESOURCE_NULL: nodes.ResourceNull,
        NodeType.RESOURCE_IDENTIFIER: nodes.ResourceIdentifier,
        NodeType.RESOURCE_ITEM: nodes.ResourceItem,
        NodeType.RESOURCE_IDENTIFIER_COLLECTION: nodes.ResourceIdentifierCollection,
        NodeType.RESOURCE_COLLECTION: nodes.ResourceCollection,
        NodeType.ATTRIBUTES: nodes.Attributes,
        NodeType.RELATIONSHIP: nodes.Relationship,
        NodeType.RELATIONSHIP_COLLECTION: nodes.RelationshipCollection,
        NodeType.META: nodes.Meta,
        NodeType.JSONAPI: nodes.Jsonapi,
        NodeType.PAGINATION: nodes.Pagination,
        NodeType.LINK: nodes.Link,
        NodeType.DOCUMENT_LINK: nodes.DocumentLink,
        NodeType.RESOURCE_ITEM_LINK: nodes.ResourceItemLink,
        NodeType.RELATIONSHIP_LINK: nodes.RelationshipLink,
        NodeType.ERROR_LINK: nodes.ErrorLink,
        NodeType.ERROR: nodes.Error,
        NodeType.ERROR_COLLECTION: nodes.ErrorCollection,
        NodeType.ERROR_SOURCE: nodes.ErrorSource,
    }


class Factory:
    """Builds node instances by registered name.

    Args:
        overrides: Optional mapping from type name to a constructor accepting
            ``(manager, parent)``. Entries replace built-in node classes with
            the same name, or add new names.
    """

    def __init__(self, overrides: Mapping[str, Constructor] | None = None) -> None:
        registry = _default_registry()
        if overrides:
            registry.update({str(name): ctor for name, ctor in overrides.items()})
        self._registry: Mapping[str, Constructor] = MappingProxyType(registry)

    @property
    def registry(self) -> Mapping[str, Constructor]:
        """Read-only view of the name -> constructor table."""
        return self._registry

    def make(self, name: str, *args: Any) -> Any:
        """Construct the node registered as ``name`` with ``args``.

        Raises:
            FactoryError: If ``name`` is not registered.
        """
        try:
            constructor = self._registry[str(name)]
        except KeyError:
            raise FactoryError(f'"{name}" is not a registered class') from None
        return constructor(*args)
