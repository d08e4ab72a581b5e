"""Manager: per-parse context holding the factory, configuration and policy.

Every node receives the manager it was built by and asks it for:

- ``factory``    to construct child nodes by name,
- ``get_config`` to read a named toggle (e.g. ``optional_item_id``),
- ``policy``     to parse the elements of an ``errors`` array.

A manager holds no per-call state, so one instance may parse any number of
documents.
"""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_client.config import FailurePolicyKind, ManagerConfig
from jsonapi_client.factory import Factory, NodeType
from jsonapi_client.policies import make_policy
from jsonapi_client.protocols import FailurePolicy, Input

__all__ = ["Manager"]

logger = logging.getLogger(__name__)


class Manager:
    """Entry point of the validation engine.

    Example::

        from jsonapi_client.manager import Manager

        manager = Manager()
        document = manager.parse({"data": {"type": "articles", "id": "1"}})
        document.get("data.type")    # "articles"

    Args:
        factory: Node factory. Defaults to ``Factory()`` with the built-in
            node classes.
        config:  Named toggles. Defaults to ``ManagerConfig()`` (a response
            document).
        policy:  Failure policy for ``errors`` arrays: a FailurePolicyKind
            (or its value), or any object with a conformant ``parse_each``
            method. Defaults to ``FailurePolicyKind.ABORT``.

    Raises:
        TypeError: If ``policy`` is neither a kind nor a FailurePolicy.
        ValueError: If ``policy`` is a string that names no FailurePolicyKind.
    """

    def __init__(
        self,
        factory: Factory | None = None,
        config: ManagerConfig | None = None,
        policy: FailurePolicyKind | str | FailurePolicy = FailurePolicyKind.ABORT,
    ) -> None:
        self._factory: Factory = factory if factory is not None else Factory()
        self._config: ManagerConfig = config if config is not None else ManagerConfig()
        self._policy: FailurePolicy = _resolve_policy(policy)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def factory(self) -> Factory:
        return self._factory

    @property
    def config(self) -> ManagerConfig:
        return self._config

    @property
    def policy(self) -> FailurePolicy:
        return self._policy

    def get_config(self, name: str) -> Any:
        """Return the configuration toggle called ``name``."""
        return self._config.get(name)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, source: Input | Any) -> Any:
        """Validate a decoded JSON value and return the root Document.

        Args:
            source: An ``Input`` adapter or an already-decoded JSON value.

        Returns:
            The parsed Document node.

        Raises:
            InputError: If an ``Input`` adapter cannot decode its payload.
            ValidationError: If the value is not a valid JSON:API document.
        """
        value = source.get_value() if isinstance(source, Input) else source
        kind = "request" if self._config.request_body else "response"
        logger.debug("Parsing %s document (policy=%s)", kind, type(self._policy).__name__)

        document = self._factory.make(NodeType.DOCUMENT, self, None)
        document.parse(value)

        logger.debug("Parsed %s document with members %s", kind, document.get_keys())
        return document


def _resolve_policy(policy: FailurePolicyKind | str | FailurePolicy) -> FailurePolicy:
    if isinstance(policy, str):
        return make_policy(policy)
    if isinstance(policy, FailurePolicy):
        return policy
    msg = f"policy must be a FailurePolicyKind or a FailurePolicy, got {type(policy).__name__}"
    raise TypeError(msg)
