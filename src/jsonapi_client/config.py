"""ManagerConfig and FailurePolicyKind for parse-time configuration.

ManagerConfig is a frozen (immutable) dataclass holding the named toggles a
``Manager`` exposes to the nodes it builds. FailurePolicyKind selects how a
list of error objects reports malformed elements.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum, auto
from typing import Any


class FailurePolicyKind(StrEnum):
    """How malformed elements of an ``errors`` array are reported.

    - ABORT:   The first invalid element raises immediately.
    - COLLECT: Every element is parsed; all failures are raised together.
    """

    ABORT = auto()
    COLLECT = auto()


@dataclass(frozen=True, slots=True)
class ManagerConfig:
    """Immutable toggles consulted by nodes during one parse call.

    Attributes:
        optional_item_id: When True, the primary resource of the document may
            omit ``id`` (a client creating a resource without a
            client-generated id). Default False.
        request_body: When True, the document is a client request: ``data`` is
            mandatory and ``errors``/``included`` are forbidden. Default False.
    """

    optional_item_id: bool = False
    request_body: bool = False

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                msg = f"{f.name} must be a bool, got {type(value).__name__}"
                raise TypeError(msg)

    @classmethod
    def for_request(cls) -> ManagerConfig:
        """Configuration for parsing a client request document."""
        return cls(optional_item_id=True, request_body=True)

    def get(self, name: str) -> Any:
        """Return the toggle called ``name``.

        Raises:
            ValueError: If ``name`` is not a known toggle.
        """
        if name not in {f.name for f in fields(self)}:
            msg = f'"{name}" is not a known configuration option'
            raise ValueError(msg)
        return getattr(self, name)
