"""Free-form member nodes: Meta, Attributes, Jsonapi.

Meta and Attributes keep every member as a deep copy of the decoded JSON
value; nested objects inside them are plain dicts, not nodes. A member nested
deeper than the interpreter's recursion limit is rejected.
"""

from __future__ import annotations

import copy
from typing import Any

from jsonapi_client.exceptions import ValidationError
from jsonapi_client.factory import NodeType
from jsonapi_client.nodes.base import Node
from jsonapi_client.shapes import json_kind, to_string

__all__ = ["Attributes", "Jsonapi", "Meta"]


class Meta(Node):
    """Non-standard meta-information. Any members are allowed."""

    label = "Meta"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        for name, member in obj.items():
            self._store.set(name, _copy_member(self.label, name, member))


class Attributes(Node):
    """The ``attributes`` member of a resource object."""

    label = "Attributes"

    # Names reserved by the resource object itself.
    RESERVED = ("type", "id", "relationships", "links")

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        if any(name in obj for name in self.RESERVED):
            raise ValidationError(
                'These properties are not allowed in attributes: "type", "id", '
                '"relationships", "links"'
            )
        for name, member in obj.items():
            self._store.set(name, _copy_member(self.label, name, member))


class Jsonapi(Node):
    """The top-level ``jsonapi`` object: ``version`` and ``meta``."""

    label = "Jsonapi"

    def _parse(self, value: Any) -> None:
        obj = self._require_object(value)
        parsed: dict[str, Any] = {}

        if "version" in obj:
            version = obj["version"]
            if isinstance(version, (dict, list)):
                msg = f'property "version" cannot be an object or array, "{json_kind(version)}" given.'
                raise ValidationError(msg)
            parsed["version"] = to_string(version)

        if "meta" in obj:
            parsed["meta"] = self._make(NodeType.META, obj["meta"])

        self._publish(obj, parsed)


def _copy_member(label: str, name: str, member: Any) -> Any:
    try:
        return copy.deepcopy(member)
    except RecursionError as exc:
        msg = f'{label} property "{name}" is nested too deeply.'
        raise ValidationError(msg) from exc
