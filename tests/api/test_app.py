"""
Integration tests for the HTTP application
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from boardql import __version__
from boardql.api.app import create_app
from boardql.config import Settings


@pytest.fixture
def app_settings():
    return Settings(debug=False, log_level="WARNING")


@pytest_asyncio.fixture
async def client(app_settings):
    app = create_app(app_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def graphql(client, query, variables=None):
    response = await client.post("/graphql", json={"query": query, "variables": variables})
    assert response.status_code == 200
    return response.json()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_request_id_generated(client):
    response = await client.get("/health")

    assert response.headers.get("x-request-id")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_request_id_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["x-request-id"] == "req-123"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_query_over_http(client):
    body = await graphql(client, "{ allBoards { id author { fullName } } }")

    assert body["data"] == {
        "allBoards": [
            {"id": "1", "author": {"fullName": "Lee SM"}},
            {"id": "2", "author": None},
        ]
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_mutations_share_app_store(client):
    posted = await graphql(
        client,
        "mutation ($t: String!, $a: ID!) { postBoard(title: $t, author: $a) { id } }",
        {"t": "Hello", "a": "1"},
    )
    new_id = posted["data"]["postBoard"]["id"]

    fetched = await graphql(client, "query ($id: ID!) { board(id: $id) { title } }", {"id": new_id})
    assert fetched["data"] == {"board": {"title": "Hello"}}

    deleted = await graphql(client, "mutation ($id: ID!) { deleteBoard(id: $id) }", {"id": new_id})
    assert deleted["data"] == {"deleteBoard": True}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_apps_do_not_share_store(app_settings):
    first = create_app(app_settings)
    second = create_app(app_settings)

    first.state.store.remove_board("1")

    assert second.state.store.get_board("1") is not None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_seed_disabled():
    app = create_app(Settings(debug=False, log_level="WARNING", seed_data=False))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        body = await graphql(client, "{ allUsers { id } allBoards { id } }")

    assert body["data"] == {"allUsers": [], "allBoards": []}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphiql_served(client):
    response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "graphiql" in response.text.lower()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphiql_disabled():
    app = create_app(Settings(debug=False, log_level="WARNING", graphiql=False))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 404
