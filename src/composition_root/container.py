from __future__ import annotations

from dataclasses import dataclass

import httpx

from application.todo.commands.add_todo import AddTodoCommand
from application.todo.commands.delete_todo import DeleteTodoCommand
from application.todo.commands.toggle_todo import ToggleTodoCommand
from application.todo.queries.list_todos import ListTodosQuery
from env import Settings, load_settings
from infrastructure.data.repositories.graphql_todo_repository import GraphQLTodoRepository
from infrastructure.graphql.cache import NormalizedCache
from infrastructure.graphql.client import GraphQLClient
from presentation.controllers.todo_controller import Confirm, TodoListController


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    client: GraphQLClient
    repository: GraphQLTodoRepository
    list_todos_query: ListTodosQuery
    add_todo_command: AddTodoCommand
    toggle_todo_command: ToggleTodoCommand
    delete_todo_command: DeleteTodoCommand

    @property
    def cache(self) -> NormalizedCache:
        return self.client.cache

    def create_controller(self, confirm: Confirm) -> TodoListController:
        return TodoListController(
            list_query=self.list_todos_query,
            add_command=self.add_todo_command,
            toggle_command=self.toggle_todo_command,
            delete_command=self.delete_todo_command,
            confirm=confirm,
            subscribe=self.cache.subscribe,
        )

    async def aclose(self) -> None:
        await self.client.aclose()


def create_app_container(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppContainer:
    settings = settings or load_settings()
    client = GraphQLClient(
        settings.graphql_url,
        headers=settings.request_headers(),
        cache=NormalizedCache(),
        transport=transport,
    )
    repository = GraphQLTodoRepository(client)
    return AppContainer(
        settings=settings,
        client=client,
        repository=repository,
        list_todos_query=ListTodosQuery(repository),
        add_todo_command=AddTodoCommand(repository),
        toggle_todo_command=ToggleTodoCommand(repository),
        delete_todo_command=DeleteTodoCommand(repository),
    )
