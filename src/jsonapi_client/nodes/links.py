"""Link nodes: link objects, pagination links, and the per-context link sets.

Each links object maps a link name to either a URL string or a link object
(``href`` plus optional ``meta``). The sets differ in which names they
require and whether ``first``/``last``/``prev``/``next`` are pagination
links (which may be null to mark a page as unavailable):

- DocumentLink:     pagination when the document's data is a collection.
- RelationshipLink: needs ``self`` or ``related``; pagination when the
                    relationship's data is a collection or absent.
- ResourceItemLink: any names.
- ErrorLink:        needs ``about``.
"""

from __future__ import annotations

from typing import Any

from jsonapi_client.exceptions import ValidationError
from jsonapi_client.factory import NodeType
from jsonapi_client.nodes.base import Node
from jsonapi_client.shapes import DataShape, is_collection, json_kind

__all__ = [
    "PAGINATION_KEYS",
    "DocumentLink",
    "ErrorLink",
    "Link",
    "Pagination",
    "RelationshipLink",
    "ResourceItemLink",
]

PAGINATION_KEYS: tuple[str, ...] = ("first", "last", "prev", "next")


class Link(Node):
    """A link object: mandatory string ``href`` and optional ``meta``."""

    label = "Link"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        if "href" not in obj:
            raise ValidationError('Link must have a "href" attribute.')

        parsed: dict[str, Any] = {"href": self._string_member(obj, "href")}
        if "meta" in obj:
            parsed["meta"] = self._make(NodeType.META, obj["meta"])
        self._publish(obj, parsed)


class _LinkSet(Node):
    """Shared parsing for links objects."""

    def _parse_link(self, value: Any) -> Any:
        if isinstance(value, str):
            return value
        if isinstance(value, dict):
            return self._make(NodeType.LINK, value)
        msg = f'Link attribute has to be an object or string, "{json_kind(value)}" given.'
        raise ValidationError(msg)

    def _parse_links(self, obj: dict[str, Any], skip: tuple[str, ...] = ()) -> dict[str, Any]:
        return {
            name: self._parse_link(value)
            for name, value in obj.items()
            if name not in skip
        }

    def _parse_pagination(self, obj: dict[str, Any]) -> dict[str, Any]:
        present = {name: obj[name] for name in PAGINATION_KEYS if name in obj}
        pagination = self._make(NodeType.PAGINATION, present)
        return {name: pagination.get(name) for name in pagination.get_keys()}


class Pagination(_LinkSet):
    """Pagination links ``first``, ``last``, ``prev``, ``next``.

    Each is a URL string, a link object, or null. Null members are left out.
    Other members are ignored.
    """

    label = "Pagination"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        parsed: dict[str, Any] = {}
        for name in PAGINATION_KEYS:
            if name not in obj or obj[name] is None:
                continue
            if not isinstance(obj[name], (str, dict)):
                msg = (
                    f'property "{name}" has to be an object, a string or null, '
                    f'"{json_kind(obj[name])}" given.'
                )
                raise ValidationError(msg)
            parsed[name] = self._parse_link(obj[name])
        self._publish(obj, parsed)


class DocumentLink(_LinkSet):
    """The top-level ``links`` member of a document."""

    label = "DocumentLink"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        if is_collection(getattr(self.parent, "data_shape", None)):
            parsed = self._parse_pagination(obj)
            parsed.update(self._parse_links(obj, skip=PAGINATION_KEYS))
        else:
            parsed = self._parse_links(obj)
        self._publish(obj, parsed)


class ResourceItemLink(_LinkSet):
    """The ``links`` member of a resource object."""

    label = "ResourceItemLink"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        self._publish(obj, self._parse_links(obj))


class RelationshipLink(_LinkSet):
    """The ``links`` member of a relationship object."""

    label = "RelationshipLink"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        if "self" not in obj and "related" not in obj:
            raise ValidationError('RelationshipLink has to be at least a "self" or "related" link')

        shape: DataShape | None = getattr(self.parent, "data_shape", None)
        if shape is None or is_collection(shape):
            parsed = self._parse_pagination(obj)
            parsed.update(self._parse_links(obj, skip=PAGINATION_KEYS))
        else:
            parsed = self._parse_links(obj)
        self._publish(obj, parsed)


class ErrorLink(_LinkSet):
    """The ``links`` member of an error object; ``about`` is mandatory."""

    label = "ErrorLink"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        if "about" not in obj:
            raise ValidationError("ErrorLink MUST contain these properties: about")
        self._publish(obj, self._parse_links(obj))
