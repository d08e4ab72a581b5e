"""Failure policies applied where a list of error objects is parsed.

Per-node validators never catch their own failures. The only place a list of
otherwise-independent elements is handed to a policy is the ``errors`` array
of a document; every other collection parses its elements directly and stops
at the first failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from jsonapi_client.config import FailurePolicyKind
from jsonapi_client.exceptions import CollectedValidationError, ValidationError
from jsonapi_client.protocols import FailurePolicy

__all__ = ["AbortOnFirstPolicy", "CollectAllPolicy", "make_policy"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AbortOnFirstPolicy:
    """Propagate the first ``ValidationError`` unchanged."""

    kind = FailurePolicyKind.ABORT

    def parse_each(
        self, values: Sequence[Any], parse_one: Callable[[int, Any], T]
    ) -> list[T]:
        return [parse_one(index, value) for index, value in enumerate(values)]


class CollectAllPolicy:
    """Parse every element, then report all failures in one exception.

    Malformed elements are recorded against their position; sibling elements
    are still parsed. If anything failed, a ``CollectedValidationError`` is
    raised after the last element, so no partially valid list is returned.
    """

    kind = FailurePolicyKind.COLLECT

    def parse_each(
        self, values: Sequence[Any], parse_one: Callable[[int, Any], T]
    ) -> list[T]:
        results: list[T] = []
        failures: dict[int, ValidationError] = {}

        for index, value in enumerate(values):
            try:
                results.append(parse_one(index, value))
            except ValidationError as exc:
                logger.warning("Invalid element at position %d: %s", index, exc)
                failures[index] = exc

        if failures:
            raise CollectedValidationError(failures)
        return results


def make_policy(kind: FailurePolicyKind | str) -> FailurePolicy:
    """Return a fresh policy instance for ``kind``.

    Raises:
        ValueError: If ``kind`` is not a FailurePolicyKind value.
    """
    kind = FailurePolicyKind(kind)
    if kind is FailurePolicyKind.COLLECT:
        return CollectAllPolicy()
    return AbortOnFirstPolicy()
