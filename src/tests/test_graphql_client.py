from __future__ import annotations

import httpx
import pytest

from infrastructure.graphql.client import NETWORK_ONLY, GraphQLClient
from infrastructure.graphql.documents import GET_TODOS, TOGGLE_TODO
from infrastructure.graphql.errors import GraphQLClientError

ENDPOINT = "https://checklist.example/v1/graphql"


def _client(backend, headers=None) -> GraphQLClient:
    return GraphQLClient(ENDPOINT, headers=headers, transport=httpx.MockTransport(backend))


@pytest.mark.asyncio
async def test_admin_secret_is_sent_on_every_request(backend) -> None:
    client = _client(backend, headers={"x-hasura-admin-secret": "s3cret"})

    await client.query(GET_TODOS)
    await client.mutate(TOGGLE_TODO, {"id": "1", "done": True})

    assert [headers["x-hasura-admin-secret"] for headers in backend.headers] == ["s3cret", "s3cret"]


@pytest.mark.asyncio
async def test_cache_first_query_skips_network_on_hit(backend) -> None:
    client = _client(backend)

    first = await client.query(GET_TODOS)
    second = await client.query(GET_TODOS)

    assert first == second
    assert backend.operations() == ["getTodos"]


@pytest.mark.asyncio
async def test_network_only_query_always_requests(backend) -> None:
    client = _client(backend)

    await client.query(GET_TODOS)
    await client.query(GET_TODOS, fetch_policy=NETWORK_ONLY)

    assert backend.operations() == ["getTodos", "getTodos"]


@pytest.mark.asyncio
async def test_unknown_fetch_policy_is_rejected(backend) -> None:
    with pytest.raises(ValueError):
        await _client(backend).query(GET_TODOS, fetch_policy="cache-only")


@pytest.mark.asyncio
async def test_graphql_errors_raise_with_backend_message(backend) -> None:
    backend.error = 'x-hasura-admin-secret/x-hasura-access-key required, but not found'

    with pytest.raises(GraphQLClientError) as excinfo:
        await _client(backend).query(GET_TODOS)

    assert excinfo.value.message == backend.error
    assert excinfo.value.errors[0]["message"] == backend.error


@pytest.mark.asyncio
async def test_http_failure_raises_client_error(backend) -> None:
    backend.status_code = 500

    with pytest.raises(GraphQLClientError, match="500"):
        await _client(backend).query(GET_TODOS)


@pytest.mark.asyncio
async def test_unreachable_endpoint_raises_client_error() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(GraphQLClientError, match="Connection refused"):
        await _client(refuse).query(GET_TODOS)


@pytest.mark.asyncio
async def test_mutation_runs_update_hook_then_refetches(backend) -> None:
    client = _client(backend)
    seen: list[dict] = []

    await client.mutate(
        TOGGLE_TODO,
        {"id": "1", "done": True},
        refetch_queries=[GET_TODOS],
        update=lambda cache, data: seen.append(data),
    )

    assert backend.operations() == ["toggleTodo", "getTodos"]
    assert seen[0]["update_todos"]["returning"][0]["done"] is True
    assert client.cache.read_query(GET_TODOS)["todos"][0]["done"] is True


@pytest.mark.asyncio
async def test_failed_refetch_does_not_fail_the_mutation(backend) -> None:
    client = _client(backend)
    await client.query(GET_TODOS)
    backend.failing["getTodos"] = 503

    data = await client.mutate(TOGGLE_TODO, {"id": "1", "done": True}, refetch_queries=[GET_TODOS])

    assert data["update_todos"]["returning"][0]["done"] is True
    assert backend.operations() == ["getTodos", "toggleTodo", "getTodos"]
    assert client.cache.read_query(GET_TODOS)["todos"][0]["done"] is True
