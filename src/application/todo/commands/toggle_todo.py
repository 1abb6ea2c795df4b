from __future__ import annotations

from application.contracts.todo_dtos import TodoItemDto, ToggleTodoRequest
from domain.todo.repositories.todo_repository import TodoRepository


class ToggleTodoCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def execute(self, request: ToggleTodoRequest) -> TodoItemDto | None:
        todo = await self._repository.toggle(request.id, request.done)
        return TodoItemDto.from_entity(todo) if todo is not None else None
