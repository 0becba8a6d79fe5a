"""Product review card: photo, catalog details and remark checkboxes."""
from nicegui import ui

from src.services.remarks import REMARK_LABELS
from src.services.remark_tracker import PendingEdit
from src.ui.components.helpers import (
    DEFAULT_CARD_STYLE, FLAGGED_CARD_STYLE, THUMBNAIL_STYLE, image_placeholder,
)


def product_card(product: dict, edit: PendingEdit, on_remark_change):
    """Render a card for a single product with one checkbox per remark tag.

    Args:
        product: Catalog row with keys product_id, name, gender, category_name,
                 brand_name, thumbnail_url.
        edit: The product's pending edit (drives checkbox state and the badge).
        on_remark_change: Callback(product_id, tag, checked).
    """
    name = product.get("name", "Unnamed")
    card = ui.card().classes("w-full p-0 gap-0").style(
        FLAGGED_CARD_STYLE if edit.is_flagged else DEFAULT_CARD_STYLE
    )
    with card:
        if product.get("thumbnail_url"):
            ui.image(product["thumbnail_url"]).classes("rounded-t").style(
                THUMBNAIL_STYLE
            ).props("fit=cover")
        else:
            image_placeholder()

        with ui.column().classes("gap-1 p-3 w-full"):
            ui.label(name).classes("text-subtitle1 font-bold")
            with ui.row().classes("gap-2 items-center"):
                ui.badge(product.get("gender", ""), color="accent").props("outline")
                ui.badge(product.get("category_name", ""), color="blue-2").props("outline")
            if product.get("brand_name"):
                ui.label(f"Brand: {product['brand_name']}").classes(
                    "text-caption text-secondary"
                )

        ui.separator()

        with ui.column().classes("gap-0 p-3 w-full"):
            ui.label("Remarks:").classes("text-caption font-bold text-secondary")
            for tag, label in REMARK_LABELS.items():
                ui.checkbox(
                    label,
                    value=tag in edit.remarks,
                    on_change=lambda e, t=tag: on_remark_change(
                        product["product_id"], t, e.value
                    ),
                ).props("dense")
            if edit.is_flagged:
                ui.badge("Flagged", color="negative").classes("mt-2")
