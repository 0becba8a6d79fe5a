"""Shared UI helper functions and design tokens for product display."""

from nicegui import ui


# ─── Design Tokens ────────────────────────────────────────────────────────────

INPUT_PROPS = "outlined dense"

# Product card states
FLAGGED_CARD_STYLE = "border: 2px solid #ea4335; background: #fdecea"
DEFAULT_CARD_STYLE = "border: 2px solid transparent"

# Thumbnail box (portrait, matches the 4:5 product photos)
THUMBNAIL_STYLE = "width: 100%; aspect-ratio: 4 / 5"


def image_placeholder(text: str = "No Image Available"):
    """Render a grey box in place of a missing product photo."""
    with ui.element("div").classes(
        "flex items-center justify-center bg-grey-3 rounded"
    ).style(THUMBNAIL_STYLE):
        ui.label(text).classes("text-caption text-grey-7")


def empty_state(message: str, icon: str = "inventory_2"):
    """Render a centered message card for an empty result."""
    with ui.card().classes("w-full p-8"):
        with ui.column().classes("items-center w-full gap-2"):
            ui.icon(icon, size="xl").classes("text-grey-5")
            ui.label(message).classes("text-h6 text-secondary")
