from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from application.contracts.todo_dtos import (
    AddTodoRequest,
    DeleteTodoRequest,
    TodoItemDto,
    ToggleTodoRequest,
)
from application.todo.commands.add_todo import AddTodoCommand
from application.todo.commands.delete_todo import DeleteTodoCommand
from application.todo.commands.toggle_todo import ToggleTodoCommand
from application.todo.errors import TodoBackendError
from application.todo.queries.list_todos import ListTodosQuery


logger = logging.getLogger(__name__)

LOADING = "loading"
ERROR = "error"
READY = "ready"

DELETE_CONFIRMATION = "Do you want to delete this todo?"

Confirm = Callable[[str], Awaitable[bool]]
Listener = Callable[[], None]
Subscribe = Callable[[Listener], Callable[[], None]]


class TodoListController:
    """View state of the checklist page, free of any UI toolkit.

    Listeners registered with :meth:`on_change` are called whenever the
    state or the underlying cache changes.
    """

    def __init__(
        self,
        list_query: ListTodosQuery,
        add_command: AddTodoCommand,
        toggle_command: ToggleTodoCommand,
        delete_command: DeleteTodoCommand,
        confirm: Confirm,
        subscribe: Subscribe | None = None,
    ) -> None:
        self._list_query = list_query
        self._add_command = add_command
        self._toggle_command = toggle_command
        self._delete_command = delete_command
        self._confirm = confirm
        self._listeners: list[Listener] = []
        self._in_flight: set[str] = set()
        self._unsubscribe = subscribe(self._notify) if subscribe is not None else None

        self.draft_text = ""
        self.status = LOADING
        self.error_message: str | None = None
        self.last_mutation_error: str | None = None

    @property
    def todos(self) -> list[TodoItemDto]:
        return self._list_query.cached() or []

    def on_change(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._listeners.clear()

    async def load(self, refresh: bool = False) -> None:
        self.status = LOADING
        self.error_message = None
        self._notify()
        try:
            await self._list_query.execute(refresh=refresh)
        except TodoBackendError as exc:
            logger.warning("Loading todos failed: %s", exc.message)
            self.status = ERROR
            self.error_message = exc.message
        else:
            self.status = READY
        self._notify()

    async def submit(self) -> bool:
        if not self.draft_text.strip():
            return False
        try:
            await self._add_command.execute(AddTodoRequest(text=self.draft_text))
        except TodoBackendError as exc:
            self._mutation_failed("add", exc)
            return False
        self.draft_text = ""
        self._notify()
        return True

    async def toggle(self, todo: TodoItemDto) -> bool:
        if todo.id in self._in_flight:
            logger.debug("Ignoring toggle of %s, request already in flight", todo.id)
            return False
        self._in_flight.add(todo.id)
        try:
            await self._toggle_command.execute(ToggleTodoRequest(id=todo.id, done=not todo.done))
        except TodoBackendError as exc:
            self._mutation_failed("toggle", exc)
            return False
        finally:
            self._in_flight.discard(todo.id)
        return True

    async def delete(self, todo: TodoItemDto) -> bool:
        if todo.id in self._in_flight:
            logger.debug("Ignoring delete of %s, request already in flight", todo.id)
            return False
        self._in_flight.add(todo.id)
        try:
            if not await self._confirm(DELETE_CONFIRMATION):
                return False
            await self._delete_command.execute(DeleteTodoRequest(id=todo.id))
        except TodoBackendError as exc:
            self._mutation_failed("delete", exc)
            return False
        finally:
            self._in_flight.discard(todo.id)
        return True

    def take_mutation_error(self) -> str | None:
        message, self.last_mutation_error = self.last_mutation_error, None
        return message

    def _mutation_failed(self, action: str, exc: TodoBackendError) -> None:
        logger.error("%s todo failed: %s", action, exc.message)
        self.last_mutation_error = exc.message
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
