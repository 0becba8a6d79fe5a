"""Catalog review page -- browse products and flag them with remarks."""
import asyncio
import logging

from nicegui import ui

from src.services.catalog_client import CatalogClientError
from src.services.review_session import NothingToSaveError, ReviewSession
from src.ui.components import (
    empty_state, filter_bar, pagination_bar, product_card,
)
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


def catalog_page(session: ReviewSession | None = None):
    """Render the product review page for one reviewer."""
    review = session or ReviewSession()
    state = {"loading": True}
    card_slots: dict = {}

    content = build_layout(subtitle="Review products for virtual try-on suitability")

    with content:
        filters_container = ui.column().classes("w-full")
        save_container = ui.row().classes("w-full items-center gap-4")
        product_container = ui.element("div").classes("w-full grid gap-4").style(
            "grid-template-columns: repeat(auto-fill, minmax(260px, 1fr))"
        )
        pager_container = ui.column().classes("w-full")

    async def _in_executor(fn, *args):
        return await asyncio.get_event_loop().run_in_executor(None, fn, *args)

    # ---------------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------------

    def render_filters():
        filters_container.clear()
        with filters_container:
            filter_bar(review.filters, review.filter_options, _on_filter_change, _on_clear_filters)

    def render_save_bar():
        save_container.clear()
        with save_container:
            save_btn = ui.button("Save Remarks", icon="save", on_click=_on_save).props(
                "color=primary"
            )
            save_btn.set_enabled(review.has_changes and not state["loading"])
            if review.has_changes:
                ui.label("You have unsaved changes").classes("text-body2 text-warning")
            total = review.pagination.get("total", 0)
            ui.space()
            ui.label(f"{total} product(s) awaiting review").classes(
                "text-body2 text-secondary"
            )

    def render_card(product: dict):
        slot = card_slots[product["product_id"]]
        slot.clear()
        with slot:
            product_card(product, review.remarks_for(product["product_id"]), _on_remark_change)

    def render_products():
        product_container.clear()
        card_slots.clear()
        with product_container:
            if state["loading"]:
                with ui.row().classes("items-center gap-3 p-4"):
                    ui.spinner(size="lg")
                    ui.label("Loading products...").classes("text-body1 text-secondary")
                return
            if review.error:
                with ui.card().classes("w-full p-6"):
                    with ui.column().classes("items-center w-full gap-2"):
                        ui.icon("error_outline", size="xl").classes("text-negative")
                        ui.label(review.error).classes("text-body1 text-negative")
                        ui.button("Retry", icon="refresh", on_click=_on_retry).props(
                            "color=primary outline"
                        )
                return
            if not review.products:
                empty_state("No products found. Try adjusting your filters.")
                return
            for product in review.products:
                card_slots[product["product_id"]] = ui.element("div").classes("w-full")
        for product in review.products:
            render_card(product)

    def render_pager():
        pager_container.clear()
        if state["loading"] or review.error:
            return
        with pager_container:
            pagination_bar(review.page, review.total_pages, _on_page_change)

    def render_all():
        render_filters()
        render_save_bar()
        render_products()
        render_pager()

    async def _reload(action, *args):
        state["loading"] = True
        render_save_bar()
        render_products()
        render_pager()
        await _in_executor(action, *args)
        state["loading"] = False
        render_all()

    # ---------------------------------------------------------------
    # Event handlers
    # ---------------------------------------------------------------

    async def _initial_load():
        state["loading"] = True
        render_all()
        # Filter options and the first page are independent reads
        await asyncio.gather(
            _in_executor(review.load_filter_options),
            _in_executor(review.refresh),
        )
        state["loading"] = False
        render_all()

    async def _on_filter_change(name: str, value):
        if (value or "") == (review.filters.get(name) or ""):
            return
        await _reload(review.set_filter, name, value)

    async def _on_clear_filters():
        await _reload(review.clear_filters)

    async def _on_page_change(page: int):
        if page == review.page:
            return
        await _reload(review.go_to_page, page)

    async def _on_retry():
        await _reload(review.refresh)

    def _on_remark_change(product_id, tag: str, checked: bool):
        review.toggle_remark(product_id, tag, checked)
        product = next((p for p in review.products if p["product_id"] == product_id), None)
        if product is not None and product_id in card_slots:
            render_card(product)
        render_save_bar()

    async def _on_save():
        try:
            saved = await _in_executor(review.commit)
        except NothingToSaveError as exc:
            ui.notify(str(exc), type="warning")
            return
        except CatalogClientError:
            logger.exception("Error saving remarks")
            ui.notify("Failed to save remarks. Please try again.", type="negative")
            render_save_bar()
            return
        ui.notify(f"Successfully saved {saved} product(s)!", type="positive")
        # Flagged products drop out of the filter options too
        await _in_executor(review.load_filter_options)
        render_all()

    ui.timer(0.1, _initial_load, once=True)
