"""AccessMixin: dotted-path navigation shared by every node type.

A path is either an ``int`` (one collection position) or a ``str`` of
dot-separated segments, e.g. ``"data.0.relationships.author.data.id"``.
Each segment is resolved against the current node's ``AttributeStore``; the
walk descends only into values that are themselves ``Accessible``. Plain JSON
values kept inside Meta or Attributes members are leaves.
"""

from __future__ import annotations

from typing import Any

from jsonapi_client.exceptions import AccessError
from jsonapi_client.protocols import Accessible
from jsonapi_client.store import AttributeStore, Key

__all__ = ["AccessMixin", "split_path"]


def split_path(path: Any) -> list[Key] | None:
    """Split ``path`` into segments, or return None for unusable key types."""
    if isinstance(path, bool):
        return None
    if isinstance(path, int):
        return [path]
    if isinstance(path, str):
        return list(path.split("."))
    return None


class AccessMixin:
    """Accessor capability over a node's ``_store``.

    Host classes provide ``self._store`` (an ``AttributeStore``). Collections
    override ``_normalize_key`` so ``"0"`` addresses position ``0``.
    """

    _store: AttributeStore

    def _normalize_key(self, key: Key) -> Key:
        return key

    def has(self, path: Any) -> bool:
        """Return True if every segment of ``path`` resolves. Never raises."""
        segments = split_path(path)
        if segments is None:
            return False

        key = self._normalize_key(segments[0])
        if not self._store.has(key):
            return False
        if len(segments) == 1:
            return True

        value = self._store.get(key)
        if not isinstance(value, Accessible):
            return False
        return value.has(".".join(str(s) for s in segments[1:]))

    def get(self, path: Any) -> Any:
        """Return the value at ``path``.

        Raises:
            AccessError: Naming the first segment that cannot be resolved.
        """
        segments = split_path(path)
        if segments is None:
            raise AccessError(f'"{path}" doesn\'t exist in this {self._store.context}.')

        head = segments[0]
        value = self._store.get(self._normalize_key(head))
        if len(segments) == 1:
            return value

        if not isinstance(value, Accessible):
            raise AccessError(f'"{segments[1]}" doesn\'t exist in "{head}".')
        return value.get(".".join(str(s) for s in segments[1:]))

    def get_keys(self) -> list[Key]:
        return self._store.keys()

    def as_plain(self, recursive: bool = False) -> Any:
        """Return this node as a plain dict.

        Args:
            recursive: Unwrap nested nodes into their plain form as well.
        """
        return self._store.to_plain(recursive=recursive)
