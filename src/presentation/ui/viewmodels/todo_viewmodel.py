from __future__ import annotations

from collections.abc import Iterable

from application.contracts.todo_dtos import TodoItemDto
from styles import C_TODO_DONE, C_TODO_TEXT


def todo_classes(todo: TodoItemDto) -> str:
    return f"{C_TODO_TEXT} {C_TODO_DONE}" if todo.done else C_TODO_TEXT


def todo_to_viewmodel(todo: TodoItemDto) -> dict[str, object]:
    return {"id": todo.id, "text": todo.text, "done": todo.done, "classes": todo_classes(todo), "todo": todo}


def todos_to_viewmodels(todos: Iterable[TodoItemDto]) -> list[dict[str, object]]:
    return [todo_to_viewmodel(todo) for todo in todos]
