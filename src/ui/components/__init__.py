"""Reusable UI components."""
from src.ui.components.filter_bar import filter_bar
from src.ui.components.helpers import empty_state, image_placeholder
from src.ui.components.pagination_bar import pagination_bar
from src.ui.components.product_card import product_card

__all__ = [
    "filter_bar",
    "empty_state",
    "image_placeholder",
    "pagination_bar",
    "product_card",
]
