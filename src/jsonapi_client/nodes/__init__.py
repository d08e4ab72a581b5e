"""Node types of a parsed JSON:API document.

Re-exports every built-in node class; the factory registers each of them
under its ``NodeType`` name.
"""

from jsonapi_client.nodes.base import CollectionNode, Node
from jsonapi_client.nodes.document import Document
from jsonapi_client.nodes.error import Error, ErrorCollection, ErrorSource
from jsonapi_client.nodes.links import (
    DocumentLink,
    ErrorLink,
    Link,
    Pagination,
    RelationshipLink,
    ResourceItemLink,
)
from jsonapi_client.nodes.meta import Attributes, Jsonapi, Meta
from jsonapi_client.nodes.relationship import Relationship, RelationshipCollection
from jsonapi_client.nodes.resource import (
    ResourceCollection,
    ResourceIdentifier,
    ResourceIdentifierCollection,
    ResourceItem,
    ResourceNull,
)

__all__ = [
    "Attributes",
    "CollectionNode",
    "Document",
    "DocumentLink",
    "Error",
    "ErrorCollection",
    "ErrorLink",
    "ErrorSource",
    "Jsonapi",
    "Link",
    "Meta",
    "Node",
    "Pagination",
    "Relationship",
    "RelationshipCollection",
    "RelationshipLink",
    "ResourceCollection",
    "ResourceIdentifier",
    "ResourceIdentifierCollection",
    "ResourceItem",
    "ResourceItemLink",
    "ResourceNull",
]
