"""
Tests for request logging middleware helpers
"""

from urllib.parse import urlencode

import pytest
from starlette.requests import Request

from boardql.middleware import extract_graphql_operation_name, redact_graphql_params


def make_request(path: str, method: str = "GET", params: dict | None = None, body: bytes = b""):
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": urlencode(params or {}).encode(),
        "headers": [],
        "server": ("test", 80),
        "scheme": "http",
    }

    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_operation_name_from_get_params():
    request = make_request("/graphql", params={"operationName": "AllBoards"})

    assert await extract_graphql_operation_name(request) == "AllBoards"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_operation_name_parsed_from_query():
    request = make_request(
        "/graphql", params={"query": "mutation DeleteBoard { deleteBoard(id: 1) }"}
    )

    assert await extract_graphql_operation_name(request) == "mutation:DeleteBoard"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_operation_name_from_post_body():
    request = make_request(
        "/graphql", method="POST", body=b'{"query": "query Users { allUsers { id } }"}'
    )

    assert await extract_graphql_operation_name(request) == "Users"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_anonymous_and_introspection_operations():
    anonymous = make_request("/graphql", params={"query": "{ allUsers { id } }"})
    introspection = make_request("/graphql", params={"query": "{ __schema { types { name } } }"})

    assert await extract_graphql_operation_name(anonymous) == "unnamed_operation"
    assert await extract_graphql_operation_name(introspection) == "__introspection"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_operation_name_ignores_other_paths_and_bad_bodies():
    assert await extract_graphql_operation_name(make_request("/health")) is None
    assert (
        await extract_graphql_operation_name(make_request("/graphql", method="POST", body=b"{"))
        is None
    )


@pytest.mark.unit
def test_redact_graphql_params():
    params = {"query": "{ allUsers { id } }", "variables": "{}", "page": "1"}

    assert redact_graphql_params("/graphql", params) == {
        "query": "[REDACTED]",
        "variables": "[REDACTED]",
        "page": "1",
    }
    assert redact_graphql_params("/other", params) == params
