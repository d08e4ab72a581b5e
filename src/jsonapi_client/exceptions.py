"""Exception hierarchy for jsonapi-client.

Every error raised by the library derives from ``JsonApiError`` so callers can
catch the whole family with one ``except`` clause:

- ``ValidationError``: the input does not conform to JSON:API.
- ``CollectedValidationError``: several elements of an ``errors`` array failed
  under the collect-all policy; carries every failure by position.
- ``AccessError``: a key or path was requested that the parsed graph lacks.
- ``FactoryError``: the node factory was asked for an unregistered name.
- ``InputError``: raw input could not be decoded into a JSON value.
"""

from __future__ import annotations

__all__ = [
    "AccessError",
    "CollectedValidationError",
    "FactoryError",
    "InputError",
    "JsonApiError",
    "ValidationError",
]


class JsonApiError(Exception):
    """Base class for all jsonapi-client errors."""


class ValidationError(JsonApiError):
    """Raised when a JSON value does not fit its position in the document."""


class CollectedValidationError(ValidationError):
    """Raised once after every element of an ``errors`` array was parsed.

    Attributes:
        failures: Mapping from array position to the ``ValidationError`` raised
            while parsing that element. Ordered by position.
    """

    def __init__(self, failures: dict[int, ValidationError]) -> None:
        self.failures: dict[int, ValidationError] = dict(sorted(failures.items()))
        lines = [f"[{index}] {exc}" for index, exc in self.failures.items()]
        noun = "element" if len(lines) == 1 else "elements"
        super().__init__(
            f"{len(lines)} invalid error {noun} in errors array:\n" + "\n".join(lines)
        )


class AccessError(JsonApiError, KeyError):
    """Raised when a key or path does not exist in a parsed node."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0]) if self.args else ""


class FactoryError(JsonApiError):
    """Raised when a node type name has no registered constructor."""


class InputError(JsonApiError):
    """Raised when raw input cannot be turned into a decoded JSON value."""
