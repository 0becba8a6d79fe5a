"""Previous / numbered / Next page navigation."""
from nicegui import ui

from src.services.review_session import page_window


def _page_button(page: int, current: int, on_page_change):
    props = "unelevated color=primary" if page == current else "flat color=primary"
    ui.button(str(page), on_click=lambda p=page: on_page_change(p)).props(
        f"{props} dense"
    ).classes("min-w-[36px]")


def pagination_bar(current: int, total_pages: int, on_page_change):
    """Render the pagination controls; nothing when there is a single page."""
    if total_pages <= 1:
        return

    window = page_window(current, total_pages)
    with ui.row().classes("w-full items-center justify-center gap-2 mt-4"):
        prev_btn = ui.button(
            "Previous", icon="chevron_left", on_click=lambda: on_page_change(current - 1),
        ).props("flat dense")
        prev_btn.set_enabled(current > 1)

        if window.show_first:
            _page_button(1, current, on_page_change)
            if window.show_leading_ellipsis:
                ui.label("...").classes("text-secondary")

        for page in window.pages:
            _page_button(page, current, on_page_change)

        if window.show_last:
            if window.show_trailing_ellipsis:
                ui.label("...").classes("text-secondary")
            _page_button(total_pages, current, on_page_change)

        next_btn = ui.button(
            "Next", on_click=lambda: on_page_change(current + 1),
        ).props("flat dense icon-right=chevron_right")
        next_btn.set_enabled(current < total_pages)
