"""Run the Graphql Checklist NiceGUI app."""

import logging

from nicegui import Client, app, context, ui

from composition_root import AppContainer, create_app_container
from env import load_env, load_settings
from logging_setup import setup_logging
from presentation.controllers.todo_controller import TodoListController
from presentation.ui.dialogs import confirm_dialog
from presentation.ui.pages.todos import render_todo_page


logger = logging.getLogger(__name__)


def open_controller(container: AppContainer, client: Client) -> TodoListController:
    controller = container.create_controller(confirm=confirm_dialog)
    # Disconnect also fires on socket reconnects; only a deleted client is gone for good.
    client.on_delete(controller.close)
    return controller


def register_pages(container: AppContainer) -> None:
    @ui.page("/")
    def index() -> None:
        controller = open_controller(container, context.client)
        render_todo_page(controller)
        ui.timer(0.0, controller.load, once=True)


def run() -> None:
    load_env()
    settings = load_settings()
    setup_logging(debug=settings.debug)
    if not settings.admin_secret:
        logger.warning("CHECKLIST_ADMIN_SECRET is not set; requests will be rejected by the backend")

    container = create_app_container(settings)
    register_pages(container)
    app.on_shutdown(container.aclose)

    ui.run(
        title="Graphql Checklist",
        host=settings.host,
        port=settings.port,
        favicon="✅",
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
