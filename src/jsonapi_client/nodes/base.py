"""Node and CollectionNode: the shared skeleton of every node type.

A node is constructed empty (*unparsed*), populated exactly once by
``parse()``, and frozen afterwards (*parsed*). Subclasses implement
``_parse(value)``; they build children through the manager's factory with
``_make()`` and publish their members with ``_publish()`` in input order.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jsonapi_client.access import AccessMixin
from jsonapi_client.exceptions import ValidationError
from jsonapi_client.shapes import json_kind
from jsonapi_client.store import AttributeStore, Key

if TYPE_CHECKING:
    from jsonapi_client.manager import Manager

__all__ = ["CollectionNode", "Node"]


class Node(AccessMixin):
    """Base class for all node types.

    Attributes:
        manager: The ``Manager`` driving this parse call (factory, config,
            failure policy).
        parent:  The node that created this one, or None for the document.
            Only read for ancestor queries; never mutated.
    """

    # Name used in "<label> has to be an object" messages.
    label: str = "Object"
    # Noun used in "doesn't exist in this <context>" messages.
    context: str = "object"

    def __init__(self, manager: Manager, parent: Any = None) -> None:
        self.manager = manager
        self.parent = parent
        self._store = AttributeStore(self.context)

    def __repr__(self) -> str:
        state = "parsed" if self.parsed else "unparsed"
        return f"<{type(self).__name__} {state} keys={self.get_keys()!r}>"

    @property
    def parsed(self) -> bool:
        return self._store.frozen

    def parse(self, value: Any) -> Node:
        """Validate ``value`` and populate this node.

        On failure the node is left unparsed and empty, so it may be parsed
        again.

        Returns:
            ``self``, now in the parsed state.

        Raises:
            ValidationError: If ``value`` does not fit this node type.
            RuntimeError: If the node was already parsed.
        """
        if self.parsed:
            raise RuntimeError(f"{type(self).__name__} has already been parsed")
        try:
            self._parse(value)
        except Exception:
            # Members stored before the failure must not survive a retry.
            self._store = AttributeStore(self.context)
            raise
        self._store.freeze()
        return self

    def _parse(self, value: Any) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def _make(self, node_type: str, value: Any) -> Any:
        """Build the child registered as ``node_type`` and parse ``value``."""
        child = self.manager.factory.make(node_type, self.manager, self)
        return child.parse(value)

    def _require_object(self, value: Any) -> dict[str, Any]:
        if not isinstance(value, dict):
            msg = f'{self.label} has to be an object, "{json_kind(value)}" given.'
            raise ValidationError(msg)
        return value

    def _string_member(self, obj: Mapping[str, Any], name: str) -> str:
        value = obj[name]
        if not isinstance(value, str):
            msg = f'property "{name}" has to be a string, "{json_kind(value)}" given.'
            raise ValidationError(msg)
        return value

    def _publish(self, raw: Mapping[str, Any], parsed: Mapping[str, Any]) -> None:
        """Store ``parsed`` members in the order they appear in ``raw``."""
        for key in raw:
            if key in parsed:
                self._store.set(key, parsed[key])

    def is_primary_data(self) -> bool:
        """True if this node is the ``data`` member of the root document."""
        return self.parent is not None and getattr(self.parent, "parent", None) is None


class CollectionNode(Node):
    """Base class for nodes backed by a JSON array.

    Elements are stored under their integer position; ``"0"`` and ``0``
    address the same element. ``as_plain`` returns a list.
    """

    context = "resource"

    def _normalize_key(self, key: Key) -> Key:
        if isinstance(key, str) and key.isascii() and key.isdigit():
            return int(key)
        return key

    def __len__(self) -> int:
        return len(self._store)

    def as_plain(self, recursive: bool = False) -> list[Any]:
        return list(self._store.to_plain(recursive=recursive).values())
