from __future__ import annotations

from collections.abc import Awaitable, Callable

from nicegui import ui

from presentation.controllers.todo_controller import ERROR, LOADING, TodoListController
from presentation.ui.viewmodels.todo_viewmodel import todos_to_viewmodels
from styles import (
    C_BTN_DELETE,
    C_BTN_PRIM,
    C_ERROR,
    C_FORM,
    C_INPUT,
    C_LIST,
    C_MUTED,
    C_PAGE,
    C_PAGE_TITLE,
    C_TODO_ROW,
)


def render_todo_page(controller: TodoListController) -> None:
    async def run(action: Callable[..., Awaitable[bool]], *args) -> None:
        await action(*args)
        message = controller.take_mutation_error()
        if message:
            ui.notify(f"Error : {message}", color="red")

    @ui.refreshable
    def checklist() -> None:
        if controller.status == LOADING:
            ui.label("Loading...").classes(C_MUTED)
            return
        if controller.status == ERROR:
            ui.label(f"Error : {controller.error_message}").classes(C_ERROR)
            return

        ui.label("Graphql Checklist ✅").classes(C_PAGE_TITLE)
        with ui.row().classes(C_FORM):
            draft = (
                ui.input(placeholder="Write your todo..")
                .bind_value(controller, "draft_text")
                .props("outlined dense")
                .classes(C_INPUT)
            )
            draft.on("keydown.enter", lambda: run(controller.submit))
            ui.button("Create", on_click=lambda: run(controller.submit)).classes(C_BTN_PRIM)

        with ui.column().classes(C_LIST):
            for todo in todos_to_viewmodels(controller.todos):
                with ui.row().classes(C_TODO_ROW):
                    ui.label(todo["text"]).classes(todo["classes"]).on(
                        "click", lambda _, item=todo["todo"]: run(controller.toggle, item)
                    )
                    ui.button(
                        "×", on_click=lambda _, item=todo["todo"]: run(controller.delete, item)
                    ).props("flat dense").classes(C_BTN_DELETE)

    controller.on_change(checklist.refresh)
    with ui.column().classes(C_PAGE):
        checklist()
