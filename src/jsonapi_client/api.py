"""Public helper functions for jsonapi-client.

This module provides the four user-facing functions: parse_response_body,
parse_request_body, is_valid_response_body and is_valid_request_body. Each
call creates a fresh ``Manager`` so no state is shared between calls.

``body`` may be JSON text (``str``/``bytes``), an ``Input`` adapter, or an
already-decoded value (``dict``, ``list``, ...).
"""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_client.config import FailurePolicyKind, ManagerConfig
from jsonapi_client.exceptions import InputError, ValidationError
from jsonapi_client.factory import Factory
from jsonapi_client.input import StringInput
from jsonapi_client.manager import Manager
from jsonapi_client.nodes import Document
from jsonapi_client.protocols import FailurePolicy, Input

__all__ = [
    "is_valid_request_body",
    "is_valid_response_body",
    "parse_request_body",
    "parse_response_body",
]

logger = logging.getLogger(__name__)


def _as_input(body: Any) -> Input | Any:
    if isinstance(body, (str, bytes, bytearray)):
        return StringInput(body)
    return body


def parse_response_body(
    body: Any,
    factory: Factory | None = None,
    policy: FailurePolicyKind | str | FailurePolicy = FailurePolicyKind.ABORT,
) -> Document:
    """Parse a server response document.

    ``data``, ``errors`` and ``included`` are all allowed; every resource
    object must carry an ``id``.

    Args:
        body:    JSON text, an ``Input`` adapter, or a decoded value.
        factory: Optional factory with custom node classes.
        policy:  Failure policy (kind or instance) for the ``errors`` array.
                 Defaults to ABORT.

    Returns:
        The parsed Document.

    Raises:
        InputError: If ``body`` is text that is not valid JSON.
        ValidationError: If the document is not valid JSON:API.
    """
    manager = Manager(factory=factory, config=ManagerConfig(), policy=policy)
    return manager.parse(_as_input(body))


def parse_request_body(
    body: Any,
    factory: Factory | None = None,
    policy: FailurePolicyKind | str | FailurePolicy = FailurePolicyKind.ABORT,
) -> Document:
    """Parse a client request document.

    ``data`` is mandatory, ``errors`` and ``included`` are forbidden, and the
    primary resource may omit ``id`` (resource creation).

    Args:
        body:    JSON text, an ``Input`` adapter, or a decoded value.
        factory: Optional factory with custom node classes.
        policy:  Failure policy (kind or instance) for the ``errors`` array.
                 Defaults to ABORT.

    Returns:
        The parsed Document.
    """
    manager = Manager(factory=factory, config=ManagerConfig.for_request(), policy=policy)
    return manager.parse(_as_input(body))


def is_valid_response_body(body: Any) -> bool:
    """Return True if ``body`` parses as a valid response document."""
    try:
        parse_response_body(body)
    except (InputError, ValidationError) as exc:
        logger.debug("Invalid response body: %s", exc)
        return False
    return True


def is_valid_request_body(body: Any) -> bool:
    """Return True if ``body`` parses as a valid request document."""
    try:
        parse_request_body(body)
    except (InputError, ValidationError) as exc:
        logger.debug("Invalid request body: %s", exc)
        return False
    return True
