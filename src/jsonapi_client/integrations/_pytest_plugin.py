"""pytest plugin for jsonapi-client.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from jsonapi_client import InputError, ValidationError, parse_request_body, parse_response_body


def check_jsonapi_valid(body: Any, request: bool = False) -> Any:
    """Parse ``body`` and return the Document, or raise ``AssertionError``.

    Args:
        body:    JSON text or a decoded value.
        request: Parse as a client request document instead of a response.

    Raises:
        AssertionError: With the validation message and the offending body.
    """
    parse = parse_request_body if request else parse_response_body
    try:
        return parse(body)
    except (InputError, ValidationError) as exc:
        kind = "request" if request else "response"
        raise AssertionError(
            f"Not a valid JSON:API {kind} document: {exc}\n  body: {body!r}"
        ) from exc


@pytest.fixture(scope="session")
def assert_jsonapi_valid() -> Any:
    """Fixture that returns a callable JSON:API document asserter.

    The fixture is session-scoped because the returned callable is stateless
    (every call builds a fresh Manager).

    Usage in tests::

        def test_endpoint(assert_jsonapi_valid):
            document = assert_jsonapi_valid(response.json())
            assert document.get("data.type") == "articles"

        def test_create_payload(assert_jsonapi_valid):
            assert_jsonapi_valid({"data": {"type": "articles"}}, request=True)

    Returns:
        ``check_jsonapi_valid(body, request=False) -> Document``.
    """
    return check_jsonapi_valid
