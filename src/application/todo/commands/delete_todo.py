from __future__ import annotations

from application.contracts.todo_dtos import DeleteTodoRequest, TodoItemDto
from domain.todo.repositories.todo_repository import TodoRepository


class DeleteTodoCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def execute(self, request: DeleteTodoRequest) -> TodoItemDto | None:
        todo = await self._repository.delete(request.id)
        return TodoItemDto.from_entity(todo) if todo is not None else None
