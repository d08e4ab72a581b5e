"""Document: the root node of every parsed JSON:API body."""

from __future__ import annotations

from typing import Any

from jsonapi_client.exceptions import ValidationError
from jsonapi_client.factory import SHAPE_NODE_TYPES, NodeType
from jsonapi_client.nodes.base import Node
from jsonapi_client.shapes import DataShape, classify_data

__all__ = ["Document"]


class Document(Node):
    """A top-level JSON:API document.

    Members: ``data``, ``errors``, ``meta``, ``links``, ``included``,
    ``jsonapi``. At least one of ``data``/``errors``/``meta`` is required;
    ``data`` and ``errors`` are mutually exclusive; ``included`` needs
    ``data``. When the manager's ``request_body`` toggle is set, ``data`` is
    mandatory and ``errors``/``included`` are forbidden.

    Attributes:
        data_shape: The DataShape of ``data``, or None when ``data`` is absent.
    """

    label = "Document"
    context = "document"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.data_shape: DataShape | None = None

    def _parse(self, value: Any) -> None:
        self.data_shape = None
        obj = self._require_object(value)
        self._check_members(obj)

        parsed: dict[str, Any] = {}
        if "data" in obj:
            self.data_shape = classify_data(obj["data"])
            parsed["data"] = self._make(SHAPE_NODE_TYPES[self.data_shape], obj["data"])
        if "included" in obj:
            parsed["included"] = self._make(NodeType.RESOURCE_COLLECTION, obj["included"])
        if "errors" in obj:
            parsed["errors"] = self._make(NodeType.ERROR_COLLECTION, obj["errors"])
        if "meta" in obj:
            parsed["meta"] = self._make(NodeType.META, obj["meta"])
        if "jsonapi" in obj:
            parsed["jsonapi"] = self._make(NodeType.JSONAPI, obj["jsonapi"])
        if "links" in obj:
            parsed["links"] = self._make(NodeType.DOCUMENT_LINK, obj["links"])

        self._publish(obj, parsed)

    def _check_members(self, obj: dict[str, Any]) -> None:
        if self.manager.get_config("request_body"):
            if "data" not in obj:
                raise ValidationError('A request Document MUST contain a "data" property.')
            for name in ("errors", "included"):
                if name in obj:
                    raise ValidationError(
                        f'The property "{name}" MUST NOT be present in a request Document.'
                    )

        if not any(name in obj for name in ("data", "errors", "meta")):
            raise ValidationError(
                "Document MUST contain at least one of the following properties: "
                "data, errors, meta"
            )
        if "data" in obj and "errors" in obj:
            raise ValidationError('The properties "data" and "errors" MUST NOT coexist in Document.')
        if "included" in obj and "data" not in obj:
            raise ValidationError(
                'If Document does not contain a "data" property, the "included" '
                "property MUST NOT be present either."
            )
