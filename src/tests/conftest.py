from __future__ import annotations

import asyncio
import json
import re
from itertools import count
from pathlib import Path
import sys
from typing import Any

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from composition_root import AppContainer, create_app_container
from env import Settings
from infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from presentation.controllers.todo_controller import TodoListController

_OPERATION = re.compile(r"\b(?:query|mutation)\s+(\w+)")


class FakeHasura:
    """Answers the four checklist operations the way the hosted backend does."""

    def __init__(self, todos: list[dict[str, Any]] | None = None) -> None:
        self.todos = [dict(todo, __typename="todos") for todo in todos or []]
        self.requests: list[tuple[str, dict[str, Any]]] = []
        self.headers: list[httpx.Headers] = []
        self.error: str | None = None
        self.status_code = 200
        self.failing: dict[str, int] = {}
        self._ids = count(100)

    def operations(self) -> list[str]:
        return [name for name, _ in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        match = _OPERATION.search(payload["query"])
        name = match.group(1) if match else ""
        variables = payload.get("variables") or {}
        self.requests.append((name, variables))
        self.headers.append(request.headers)

        status_code = self.failing.get(name, self.status_code)
        if status_code != 200:
            return httpx.Response(status_code, text="upstream failure")
        if self.error:
            return httpx.Response(200, json={"errors": [{"message": self.error}]})

        if name == "getTodos":
            return httpx.Response(200, json={"data": {"todos": [dict(todo) for todo in self.todos]}})
        if name == "addTodo":
            todo = {"id": f"id-{next(self._ids)}", "text": variables["text"], "done": False, "__typename": "todos"}
            self.todos.append(todo)
            return self._returning("insert_todos", [todo])
        if name == "toggleTodo":
            matched = [todo for todo in self.todos if todo["id"] == variables["id"]]
            for todo in matched:
                todo["done"] = variables["done"]
            return self._returning("update_todos", matched)
        if name == "deleteTodo":
            matched = [todo for todo in self.todos if todo["id"] == variables["id"]]
            self.todos = [todo for todo in self.todos if todo["id"] != variables["id"]]
            return self._returning("delete_todos", matched)
        return httpx.Response(200, json={"errors": [{"message": f"unknown operation {name}"}]})

    @staticmethod
    def _returning(field: str, todos: list[dict[str, Any]]) -> httpx.Response:
        return httpx.Response(200, json={"data": {field: {"returning": [dict(todo) for todo in todos]}}})


class FakeConfirm:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.prompts: list[str] = []
        self.gate: asyncio.Event | None = None

    async def __call__(self, message: str) -> bool:
        self.prompts.append(message)
        if self.gate is not None:
            await self.gate.wait()
        return self.answer


@pytest.fixture()
def settings() -> Settings:
    return Settings(graphql_url="https://checklist.example/v1/graphql", admin_secret="s3cret")


@pytest.fixture()
def backend() -> FakeHasura:
    return FakeHasura([{"id": "1", "text": "Buy milk", "done": False}])


@pytest.fixture()
def container(settings: Settings, backend: FakeHasura) -> AppContainer:
    return create_app_container(settings, transport=httpx.MockTransport(backend))


@pytest.fixture()
def confirm() -> FakeConfirm:
    return FakeConfirm()


@pytest.fixture()
def controller(container: AppContainer, confirm: FakeConfirm) -> TodoListController:
    return container.create_controller(confirm=confirm)


@pytest.fixture()
def in_memory_todo_repo() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()
