"""Error objects, their ``source`` member, and the ``errors`` array."""

from __future__ import annotations

from typing import Any

from jsonapi_client.exceptions import ValidationError
from jsonapi_client.factory import NodeType
from jsonapi_client.nodes.base import CollectionNode, Node
from jsonapi_client.shapes import json_kind

__all__ = ["Error", "ErrorCollection", "ErrorSource"]


class Error(Node):
    """An error object.

    ``id``, ``status``, ``code``, ``title`` and ``detail`` must be strings;
    ``links``, ``source`` and ``meta`` are nested nodes. Every member is
    optional.
    """

    label = "Error"
    context = "error object"

    STRING_MEMBERS = ("id", "status", "code", "title", "detail")

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        parsed: dict[str, Any] = {
            name: self._string_member(obj, name)
            for name in self.STRING_MEMBERS
            if name in obj
        }
        if "links" in obj:
            parsed["links"] = self._make(NodeType.ERROR_LINK, obj["links"])
        if "source" in obj:
            parsed["source"] = self._make(NodeType.ERROR_SOURCE, obj["source"])
        if "meta" in obj:
            parsed["meta"] = self._make(NodeType.META, obj["meta"])
        self._publish(obj, parsed)


class ErrorSource(Node):
    """Where an error originated: ``pointer``, ``parameter``, ``header``."""

    label = "ErrorSource"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        parsed = {
            name: self._string_member(obj, name)
            for name in ("pointer", "parameter", "header")
            if name in obj
        }
        self._publish(obj, parsed)


class ErrorCollection(CollectionNode):
    """The top-level ``errors`` array; must hold at least one error object.

    Elements are handed to the manager's failure policy, which decides
    whether the first malformed error aborts the parse or all of them are
    reported together.
    """

    label = "Errors"
    context = "collection"

    def _parse(self, value: Any) -> None:
        if not isinstance(value, list):
            msg = f'Errors for a collection has to be in an array, "{json_kind(value)}" given.'
            raise ValidationError(msg)
        if not value:
            raise ValidationError("Errors array cannot be empty and MUST have at least one object")

        errors = self.manager.policy.parse_each(value, self._parse_error)
        for index, error in enumerate(errors):
            self._store.set(index, error)

    def _parse_error(self, index: int, value: Any) -> Any:
        return self._make(NodeType.ERROR, value)
