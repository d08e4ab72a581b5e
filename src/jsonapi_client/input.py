"""Input adapters: supply a decoded JSON value to the Manager.

``StringInput`` decodes JSON text (``str`` or ``bytes``); ``ValueInput`` wraps
a value that was decoded elsewhere. Both satisfy the ``Input`` protocol by
exposing ``get_value()``; any other class with that method works too.
"""

from __future__ import annotations

import json
from typing import Any

from jsonapi_client.exceptions import InputError
from jsonapi_client.protocols import Input

__all__ = ["Input", "StringInput", "ValueInput"]


class StringInput:
    """JSON text to be decoded with ``json.loads``.

    Raises:
        InputError: From ``get_value()`` if the text is not valid JSON or is
            nested deeper than the interpreter's recursion limit, or from
            ``__init__`` if ``text`` is neither ``str`` nor ``bytes``.
    """

    def __init__(self, text: str | bytes | bytearray) -> None:
        if not isinstance(text, (str, bytes, bytearray)):
            raise InputError(f"StringInput needs str or bytes, got {type(text).__name__}")
        self._text = text

    def get_value(self) -> Any:
        try:
            return json.loads(self._text)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
            raise InputError(f"Unable to parse JSON data: {exc}") from exc


class ValueInput:
    """An already-decoded JSON value, passed through unchanged."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def get_value(self) -> Any:
        return self._value
