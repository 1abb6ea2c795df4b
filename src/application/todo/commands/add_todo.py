from __future__ import annotations

from application.contracts.todo_dtos import AddTodoRequest, TodoItemDto
from application.todo.errors import TodoTextEmptyError
from domain.todo.repositories.todo_repository import TodoRepository


class AddTodoCommand:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    async def execute(self, request: AddTodoRequest) -> TodoItemDto:
        text = request.text or ""
        if not text.strip():
            raise TodoTextEmptyError("Todo text cannot be empty.")
        # Only the emptiness check trims; the text is sent as typed.
        todo = await self._repository.add(text)
        return TodoItemDto.from_entity(todo)
