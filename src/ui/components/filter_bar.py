"""Gender / category / brand filter bar."""
from nicegui import ui

from src.ui.components.helpers import INPUT_PROPS

_ALL = ""


def _category_options(categories: list[dict]) -> dict:
    options = {_ALL: "All Categories"}
    for cat in categories:
        options[str(cat["id"])] = f"{cat['gender']} - {cat['name']}"
    return options


def filter_bar(filters: dict, options: dict, on_change, on_clear):
    """Render the filter selects.

    Args:
        filters: Current values keyed by gender / category_id / brand_id
                 ("" means no filter).
        options: Filter options as returned by the API.
        on_change: Callback(name, value) when a select changes.
        on_clear: Callback() for the Clear Filters button.
    """
    gender_opts = {_ALL: "All Genders", **{g: g for g in options.get("genders", [])}}
    brand_opts = {_ALL: "All Brands", **{
        str(b["id"]): b["name"] for b in options.get("brands", [])
    }}
    category_opts = _category_options(options.get("categories", []))

    with ui.card().classes("w-full p-4"):
        ui.label("Filters").classes("text-subtitle1 font-bold")
        with ui.row().classes("w-full items-end gap-4"):
            for name, label, opts in (
                ("gender", "Gender", gender_opts),
                ("category_id", "Category", category_opts),
                ("brand_id", "Brand", brand_opts),
            ):
                current = str(filters.get(name) or _ALL)
                ui.select(
                    opts,
                    value=current if current in opts else _ALL,
                    label=label,
                    on_change=lambda e, n=name: on_change(n, e.value),
                ).props(INPUT_PROPS).classes("w-56")

            if any(filters.values()):
                ui.button(
                    "Clear Filters", icon="filter_alt_off", on_click=on_clear,
                ).props("flat color=primary")
