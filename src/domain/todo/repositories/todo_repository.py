from __future__ import annotations

from typing import Protocol, runtime_checkable

from domain.todo.entities.todo import Todo


@runtime_checkable
class TodoRepository(Protocol):
    """Repository interface for Todo entities held by the remote backend."""

    async def list(self, refresh: bool = False) -> list[Todo]:
        ...

    def cached(self) -> list[Todo] | None:
        ...

    async def add(self, text: str) -> Todo:
        ...

    async def toggle(self, todo_id: str, done: bool) -> Todo | None:
        ...

    async def delete(self, todo_id: str) -> Todo | None:
        ...
