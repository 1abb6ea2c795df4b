from __future__ import annotations

from dataclasses import replace
from itertools import count
from typing import Iterable, Optional

from domain.todo.entities.todo import Todo


class InMemoryTodoRepository:
    """Dict-backed test double for the application-layer tests."""

    def __init__(self, initial_items: Optional[Iterable[Todo]] = None) -> None:
        self._items: dict[str, Todo] = {}
        self._loaded = False
        for item in initial_items or []:
            self._items[item.id] = item
        self._next_id = count(len(self._items) + 1)

    async def list(self, refresh: bool = False) -> list[Todo]:
        self._loaded = True
        return list(self._items.values())

    def cached(self) -> list[Todo] | None:
        if not self._loaded:
            return None
        return list(self._items.values())

    async def add(self, text: str) -> Todo:
        todo = Todo(id=str(next(self._next_id)), text=text)
        self._items[todo.id] = todo
        return todo

    async def toggle(self, todo_id: str, done: bool) -> Todo | None:
        if todo_id not in self._items:
            return None
        todo = replace(self._items[todo_id], done=done)
        self._items[todo_id] = todo
        return todo

    async def delete(self, todo_id: str) -> Todo | None:
        return self._items.pop(todo_id, None)
