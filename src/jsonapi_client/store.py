"""AttributeStore: insertion-ordered key/value storage shared by every node.

Keys are member names (``str``) for object-like nodes and positions (``int``)
for collections. Values are JSON scalars, nested nodes, or (for Meta and
Attributes members) arbitrary decoded JSON values.

A store is written while its owning node parses and frozen afterwards; any
later ``set`` raises ``RuntimeError``.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

from jsonapi_client.exceptions import AccessError
from jsonapi_client.protocols import Accessible

__all__ = ["AttributeStore"]

Key = str | int


class AttributeStore:
    """Ordered mapping from member name or index to parsed value.

    Example::

        store = AttributeStore()
        store.set("type", "articles")
        store.set("id", "1")
        store.keys()        # ["type", "id"]
        store.has(["id"])   # False, never raises
    """

    __slots__ = ("_context", "_data", "_frozen")

    def __init__(self, context: str = "object") -> None:
        self._context: str = context
        self._data: dict[Key, Any] = {}
        self._frozen: bool = False

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._data)

    def set(self, key: Key, value: Any) -> None:
        """Insert or overwrite ``key``; first insertion fixes its position."""
        if self._frozen:
            raise RuntimeError(f'Cannot set "{key}": the store is frozen.')
        self._data[key] = value

    def freeze(self) -> None:
        self._frozen = True

    @property
    def context(self) -> str:
        return self._context

    @property
    def frozen(self) -> bool:
        return self._frozen

    def has(self, key: Any) -> bool:
        """Return True if ``key`` is stored. Non-str, non-int keys yield False."""
        if not isinstance(key, (str, int)) or isinstance(key, bool):
            return False
        return key in self._data

    def get(self, key: Any) -> Any:
        """Return the value for ``key``.

        Raises:
            AccessError: If ``key`` is not stored.
        """
        if not self.has(key):
            raise AccessError(f'"{key}" doesn\'t exist in this {self._context}.')
        return self._data[key]

    def keys(self) -> list[Key]:
        return list(self._data)

    def to_plain(self, recursive: bool = False) -> dict[Key, Any]:
        """Return the stored items as a dict in insertion order.

        Args:
            recursive: When True, nested nodes are replaced by their own plain
                form and raw JSON values are deep-copied. When False, nested
                nodes are returned as node references.
        """
        if not recursive:
            return dict(self._data)
        plain: dict[Key, Any] = {}
        for key, value in self._data.items():
            if isinstance(value, Accessible):
                plain[key] = value.as_plain(recursive=True)
            else:
                plain[key] = copy.deepcopy(value)
        return plain
