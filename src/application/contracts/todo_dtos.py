from __future__ import annotations

from dataclasses import dataclass

from domain.todo.entities.todo import Todo


@dataclass(frozen=True)
class AddTodoRequest:
    text: str


@dataclass(frozen=True)
class ToggleTodoRequest:
    id: str
    done: bool


@dataclass(frozen=True)
class DeleteTodoRequest:
    id: str


@dataclass(frozen=True)
class TodoItemDto:
    id: str
    text: str
    done: bool

    @classmethod
    def from_entity(cls, todo: Todo) -> TodoItemDto:
        return cls(id=todo.id, text=todo.text, done=todo.done)
