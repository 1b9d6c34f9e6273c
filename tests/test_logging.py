"""
Tests for structured logging helpers and request middleware
"""

from unittest.mock import MagicMock

import pytest

from holocron.logging import (
    RequestContextFilter,
    clear_request_context,
    generate_request_id,
    get_request_id,
    set_request_context,
)
from holocron.middleware import extract_graphql_operation_name


def test_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(len(request_id) == 14 for request_id in ids)


def test_request_context_is_added_to_events():
    set_request_context(request_id="req-123", operation="getHuman")
    try:
        event = RequestContextFilter()(None, "info", {"event": "hello"})
    finally:
        clear_request_context()

    assert event == {"event": "hello", "request_id": "req-123", "graphql_operation": "getHuman"}
    assert get_request_id() is None


def test_set_request_context_generates_id():
    request_id = set_request_context()
    try:
        assert get_request_id() == request_id
    finally:
        clear_request_context()


def _request(method: str, path: str, body: bytes = b"", params: dict | None = None):
    request = MagicMock()
    request.method = method
    request.url.path = path
    request.query_params = params or {}

    async def read_body():
        return body

    request.body = read_body
    return request


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (b'{"operationName": "getDroid", "query": "{ droid { name } }"}', "getDroid"),
        (b'{"query": "query getHuman { human { name } }"}', "getHuman"),
        (b'{"query": "{ info { name } }"}', "unnamed_operation"),
        (b'{"query": "query IntrospectionQuery { __schema { types { name } } }"}',
         "__introspection"),
        (b"not json", None),
        (b"", None),
    ],
)
async def test_operation_name_from_post(body, expected):
    assert await extract_graphql_operation_name(_request("POST", "/graphql", body)) == expected


@pytest.mark.asyncio
async def test_operation_name_from_get():
    params = {"query": "query randomOne { randomDroid { name } }"}
    request = _request("GET", "/graphql", params=params)

    assert await extract_graphql_operation_name(request) == "randomOne"


@pytest.mark.asyncio
async def test_operation_name_ignored_off_graphql_path():
    assert await extract_graphql_operation_name(_request("POST", "/health", b"{}")) is None
