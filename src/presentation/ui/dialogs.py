from __future__ import annotations

from nicegui import context, ui

from styles import C_BTN_PRIM


async def confirm_dialog(message: str) -> bool:
    """Ask a yes/no question in a modal and wait for the answer.

    Dismissing the dialog counts as "no". The dialog hangs off the page
    layout so a refresh of the list underneath cannot remove it.
    """
    with context.client.layout, ui.dialog() as dialog, ui.card():
        ui.label(message)
        with ui.row().classes("w-full justify-end gap-2"):
            ui.button("Cancel", on_click=lambda: dialog.submit(False)).props("flat")
            ui.button("OK", on_click=lambda: dialog.submit(True)).classes(C_BTN_PRIM)
    result = await dialog
    dialog.delete()
    return bool(result)
