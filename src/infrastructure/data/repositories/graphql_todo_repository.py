from __future__ import annotations

import logging
from typing import Any

from domain.todo.entities.todo import Todo
from infrastructure.data.cache_patches import prune_todo_from_list
from infrastructure.graphql.cache import NormalizedCache
from infrastructure.graphql.client import CACHE_FIRST, NETWORK_ONLY, GraphQLClient
from infrastructure.graphql.documents import ADD_TODO, DELETE_TODO, GET_TODOS, TOGGLE_TODO
from infrastructure.graphql.errors import GraphQLClientError


logger = logging.getLogger(__name__)


def _returning(data: dict[str, Any], field: str) -> list[dict[str, Any]]:
    return (data.get(field) or {}).get("returning") or []


def _to_todos(data: dict[str, Any] | None) -> list[Todo]:
    if data is None:
        return []
    return [Todo.from_payload(item) for item in data.get("todos") or [] if item is not None]


class GraphQLTodoRepository:
    """Todo repository backed by the hosted GraphQL endpoint."""

    def __init__(self, client: GraphQLClient) -> None:
        self._client = client

    @property
    def cache(self) -> NormalizedCache:
        return self._client.cache

    async def list(self, refresh: bool = False) -> list[Todo]:
        data = await self._client.query(GET_TODOS, fetch_policy=NETWORK_ONLY if refresh else CACHE_FIRST)
        return _to_todos(data)

    def cached(self) -> list[Todo] | None:
        data = self.cache.read_query(GET_TODOS)
        if data is None:
            return None
        return _to_todos(data)

    async def add(self, text: str) -> Todo:
        # The new row only shows up after a full re-fetch of the list.
        data = await self._client.mutate(ADD_TODO, {"text": text}, refetch_queries=[GET_TODOS])
        logger.info("add todo %s", data)
        returning = _returning(data, "insert_todos")
        if not returning:
            raise GraphQLClientError("addTodo returned no rows")
        return Todo.from_payload(returning[0])

    async def toggle(self, todo_id: str, done: bool) -> Todo | None:
        # The cached list picks up the change through normalization by id.
        data = await self._client.mutate(TOGGLE_TODO, {"id": todo_id, "done": done})
        logger.info("toggle todo %s", data)
        returning = _returning(data, "update_todos")
        return Todo.from_payload(returning[0]) if returning else None

    async def delete(self, todo_id: str) -> Todo | None:
        data = await self._client.mutate(
            DELETE_TODO,
            {"id": todo_id},
            update=lambda cache, _data: prune_todo_from_list(cache, todo_id),
        )
        logger.info("delete todo %s", data)
        returning = _returning(data, "delete_todos")
        return Todo.from_payload(returning[0]) if returning else None
