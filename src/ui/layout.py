"""Shared layout: header and content area."""
from nicegui import ui

from config import APP_TITLE


def build_layout(title: str = APP_TITLE, subtitle: str | None = None):
    """Create the shared page layout and return the main content container."""
    ui.colors(
        primary="#4A4443",
        secondary="#5f6368",
        accent="#A08968",
        positive="#34a853",
        negative="#ea4335",
    )

    with ui.header().classes("items-center justify-between px-4 bg-primary"):
        with ui.column().classes("gap-0 py-2"):
            ui.label(title).classes("text-h6 text-white")
            if subtitle:
                ui.label(subtitle).classes("text-caption text-white opacity-80")

    # Main content container
    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    return content
