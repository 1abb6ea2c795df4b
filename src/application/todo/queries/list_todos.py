from __future__ import annotations

from application.contracts.todo_dtos import TodoItemDto
from domain.todo.repositories.todo_repository import TodoRepository


class ListTodosQuery:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def execute(self, refresh: bool = False) -> list[TodoItemDto]:
        return [TodoItemDto.from_entity(todo) for todo in await self._repository.list(refresh=refresh)]

    def cached(self) -> list[TodoItemDto] | None:
        todos = self._repository.cached()
        if todos is None:
            return None
        return [TodoItemDto.from_entity(todo) for todo in todos]
