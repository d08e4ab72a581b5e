"""Shape classification for raw JSON values.

Decides which node a decoded value represents *before* any field validation
runs. ``classify_data`` is applied everywhere a ``data`` member appears
(document level and relationship level) and to each element of a resource
collection:

- ``None``                                            -> NULL
- object with ``attributes``/``relationships``/``links`` -> ITEM
- any other object                                    -> IDENTIFIER
- array at document level                             -> RESOURCE_COLLECTION
- array at relationship level                         -> IDENTIFIER_COLLECTION

Also hosts ``json_kind`` (the JSON name of a value's type, used in every
validation message) and ``to_string`` (scalar coercion for ``type``/``id``).
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

from jsonapi_client.exceptions import ValidationError

__all__ = [
    "ITEM_MEMBERS",
    "DataShape",
    "classify_data",
    "classify_resource",
    "is_collection",
    "json_kind",
    "to_string",
]

# Members whose presence turns a resource identifier into a resource object.
ITEM_MEMBERS: frozenset[str] = frozenset({"attributes", "relationships", "links"})


class DataShape(StrEnum):
    """Tagged variant a ``data`` value resolves to."""

    NULL = auto()
    IDENTIFIER = auto()
    ITEM = auto()
    IDENTIFIER_COLLECTION = auto()
    RESOURCE_COLLECTION = auto()


def json_kind(value: Any) -> str:
    """Return the JSON type name of a decoded value.

    bool is checked before int because bool subclasses int.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def to_string(value: Any) -> str:
    """Coerce a JSON scalar to ``str``.

    Strings pass through untouched (including ""). Numbers use ``str()``,
    so ``1.0`` stays ``"1.0"``; booleans become their JSON literal
    (``"true"``/``"false"``, not ``"1"``/``""``) and null becomes "".
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_collection(shape: DataShape | None) -> bool:
    return shape in (DataShape.IDENTIFIER_COLLECTION, DataShape.RESOURCE_COLLECTION)


def classify_resource(value: dict[str, Any]) -> DataShape:
    """Return ITEM if ``value`` carries any resource-object member."""
    if ITEM_MEMBERS.intersection(value):
        return DataShape.ITEM
    return DataShape.IDENTIFIER


def classify_data(value: Any, *, identifiers_only: bool = False) -> DataShape:
    """Resolve a raw ``data`` value to its DataShape.

    Args:
        value: The decoded ``data`` member.
        identifiers_only: True for relationship data, where objects are always
            resource identifiers and arrays are identifier collections.

    Raises:
        ValidationError: If ``value`` is a scalar.
    """
    if value is None:
        return DataShape.NULL
    if isinstance(value, dict):
        if identifiers_only:
            return DataShape.IDENTIFIER
        return classify_resource(value)
    if isinstance(value, list):
        if identifiers_only:
            return DataShape.IDENTIFIER_COLLECTION
        return DataShape.RESOURCE_COLLECTION

    msg = f'Data value has to be null, an object or an array, "{json_kind(value)}" given.'
    raise ValidationError(msg)
