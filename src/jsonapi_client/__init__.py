"""jsonapi-client - validate JSON:API documents into navigable object graphs."""

from __future__ import annotations

from jsonapi_client.api import (
    is_valid_request_body,
    is_valid_response_body,
    parse_request_body,
    parse_response_body,
)
from jsonapi_client.config import FailurePolicyKind, ManagerConfig
from jsonapi_client.exceptions import (
    AccessError,
    CollectedValidationError,
    FactoryError,
    InputError,
    JsonApiError,
    ValidationError,
)
from jsonapi_client.factory import Factory, NodeType
from jsonapi_client.input import StringInput, ValueInput
from jsonapi_client.manager import Manager
from jsonapi_client.protocols import Accessible, FailurePolicy, Input

__version__: str = "0.1.0"
__all__: list[str] = [
    "AccessError",
    "Accessible",
    "CollectedValidationError",
    "Factory",
    "FactoryError",
    "FailurePolicy",
    "FailurePolicyKind",
    "Input",
    "InputError",
    "JsonApiError",
    "Manager",
    "ManagerConfig",
    "NodeType",
    "StringInput",
    "ValidationError",
    "ValueInput",
    "is_valid_request_body",
    "is_valid_response_body",
    "parse_request_body",
    "parse_response_body",
]
