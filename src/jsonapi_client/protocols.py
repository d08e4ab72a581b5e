"""Structural protocols for jsonapi-client extension points.

``Accessible`` is the navigation surface every parsed node offers. Custom node
classes registered through the factory do not have to inherit from any base
class: anything with conformant ``has``/``get``/``get_keys``/``as_plain``
methods passes ``isinstance`` checks and is traversed by dotted paths.

``FailurePolicy`` is the strategy a ``Manager`` applies where a list of
independent elements is parsed (the ``errors`` array of a document). Pass an
instance as ``Manager(policy=...)`` to replace the built-in policies.

``Input`` is anything that can hand the ``Manager`` a decoded JSON value.

Example::

    from jsonapi_client.protocols import Accessible

    class FixedMeta:
        def has(self, key): return key == "answer"
        def get(self, key): return 42
        def get_keys(self): return ["answer"]
        def as_plain(self, recursive=False): return {"answer": 42}

    assert isinstance(FixedMeta(), Accessible)  # structural conformance
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Accessible(Protocol):
    """Structural protocol for navigable nodes.

    - ``has(path)`` never raises.
    - ``get(path)`` raises ``AccessError`` for a missing key or path.
    - ``get_keys()`` lists the stored keys in insertion order.
    - ``as_plain(recursive)`` returns a dict (or list, for collections).
    """

    def has(self, key: Any) -> bool: ...

    def get(self, key: Any) -> Any: ...

    def get_keys(self) -> list[str | int]: ...

    def as_plain(self, recursive: bool = False) -> Any: ...


@runtime_checkable
class FailurePolicy(Protocol):
    """Structural protocol for element-list failure handling.

    ``parse_each`` applies ``parse_one`` to every ``(index, value)`` pair and
    returns the results in order, or raises a ``ValidationError``.
    """

    def parse_each(
        self, values: Sequence[Any], parse_one: Callable[[int, Any], T]
    ) -> list[T]: ...


@runtime_checkable
class Input(Protocol):
    """Structural protocol for input adapters.

    ``get_value()`` returns the decoded JSON value, or raises ``InputError``
    if the payload cannot be decoded.
    """

    def get_value(self) -> Any: ...
