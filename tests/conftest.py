"""Shared fixtures: fresh managers and the JSON:API example documents."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from jsonapi_client import FailurePolicyKind, Manager, ManagerConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    """Return the raw JSON text of ``tests/fixtures/<name>``."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def assert_same_order(actual: Any, expected: Any) -> None:
    """Assert that every nested dict lists its keys in the same order."""
    if isinstance(expected, dict):
        assert isinstance(actual, dict)
        assert list(actual) == list(expected)
        for key in expected:
            assert_same_order(actual[key], expected[key])
    elif isinstance(expected, list):
        assert isinstance(actual, list)
        assert len(actual) == len(expected)
        for a, e in zip(actual, expected, strict=True):
            assert_same_order(a, e)


@pytest.fixture
def fixture_text() -> Callable[[str], str]:
    return read_fixture


@pytest.fixture
def fixture_value() -> Callable[[str], Any]:
    def _load(name: str) -> Any:
        return json.loads(read_fixture(name))

    return _load


@pytest.fixture
def manager() -> Manager:
    """A response-document manager with the default factory."""
    return Manager()


@pytest.fixture
def request_manager() -> Manager:
    """A request-document manager (``id`` optional on the primary resource)."""
    return Manager(config=ManagerConfig.for_request())


@pytest.fixture
def collecting_manager() -> Manager:
    """A response-document manager using the collect-all failure policy."""
    return Manager(policy=FailurePolicyKind.COLLECT)


@pytest.fixture
def same_order() -> Callable[[Any, Any], None]:
    return assert_same_order
