"""Per-reviewer controller behind the catalog page.

Lifecycle: created when the page mounts, reseeded on every catalog fetch,
mutated by remark toggles, cleared on commit or on filter/page navigation.
Pending edits are scoped to the products currently on screen, so navigating
away discards them.
"""
import logging
from dataclasses import dataclass

from config import DEFAULT_PAGE_SIZE
from src.services.catalog_client import CatalogClient, CatalogClientError
from src.services.remark_tracker import PendingEdit, RemarkTracker

logger = logging.getLogger(__name__)

FILTER_NAMES = ("category_id", "brand_id", "gender")
LOAD_ERROR_MESSAGE = "Failed to load products. Please try again."


class NothingToSaveError(Exception):
    """Raised when a commit is requested but no product carries a remark."""


def _empty_pagination(page: int, limit: int) -> dict:
    return {
        "page": page,
        "limit": limit,
        "total": 0,
        "totalPages": 0,
        "hasNext": False,
        "hasPrev": page > 1,
    }


class ReviewSession:
    """State of one reviewer's catalog view, driven through a CatalogClient."""

    def __init__(self, client: CatalogClient | None = None, page_size: int = DEFAULT_PAGE_SIZE):
        self.client = client or CatalogClient()
        self.page_size = page_size
        self.filters = {name: "" for name in FILTER_NAMES}
        self.page = 1
        self.products: list[dict] = []
        self.pagination = _empty_pagination(1, page_size)
        self.filter_options = {"categories": [], "brands": [], "genders": []}
        self.error: str | None = None
        self.tracker = RemarkTracker()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def total_pages(self) -> int:
        return self.pagination.get("totalPages", 0)

    @property
    def has_changes(self) -> bool:
        return self.tracker.has_changes

    @property
    def has_filters(self) -> bool:
        return any(self.filters.values())

    def load_filter_options(self) -> None:
        try:
            self.filter_options = self.client.fetch_filters()
        except CatalogClientError:
            logger.exception("Error fetching filters")

    def refresh(self) -> bool:
        """Fetch the current page and reseed pending edits from it.

        Returns False (and records a retryable error) when the fetch fails.
        """
        try:
            data = self.client.fetch_products(self.filters, self.page, self.page_size)
        except CatalogClientError:
            logger.exception("Error fetching products")
            self.error = LOAD_ERROR_MESSAGE
            return False
        self.products = data.get("products", [])
        self.pagination = data.get("pagination") or _empty_pagination(self.page, self.page_size)
        self.tracker.seed(self.products)
        self.error = None
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def set_filter(self, name: str, value) -> bool:
        """Change one filter, go back to page 1 and refetch."""
        if name not in self.filters:
            raise ValueError(f"Unknown filter: {name}")
        self.filters[name] = "" if value is None else value
        self.page = 1
        self.tracker.discard()
        return self.refresh()

    def clear_filters(self) -> bool:
        self.filters = {name: "" for name in FILTER_NAMES}
        self.page = 1
        self.tracker.discard()
        return self.refresh()

    def go_to_page(self, page: int) -> bool:
        """Move to *page* (clamped to the known page range) and refetch."""
        last = max(1, self.total_pages)
        self.page = min(max(1, int(page)), last)
        self.tracker.discard()
        return self.refresh()

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def remarks_for(self, product_id) -> PendingEdit:
        return self.tracker.get(product_id)

    def toggle_remark(self, product_id, tag: str, checked: bool) -> PendingEdit:
        return self.tracker.toggle(product_id, tag, checked)

    def commit(self) -> int:
        """Save every flagged pending edit in one batch, then refetch the page.

        Raises NothingToSaveError without calling the API when no product has
        a remark. On CatalogClientError the pending edits are left intact.
        """
        batch = self.tracker.pending_batch()
        if not batch:
            raise NothingToSaveError("No products to save. Please select at least one remark.")

        self.client.save_remarks(batch)
        logger.info("Saved remarks for %d product(s)", len(batch))
        self.tracker.discard()
        self.refresh()
        return len(batch)


@dataclass(frozen=True)
class PageWindow:
    pages: list[int]
    show_first: bool
    show_leading_ellipsis: bool
    show_last: bool
    show_trailing_ellipsis: bool


def page_window(current: int, total: int, max_visible: int = 5) -> PageWindow:
    """Numbered buttons around *current*, with first/last shortcuts and ellipses.

    A shortcut is shown only when its page is outside the numbered window.
    """
    start = max(1, current - max_visible // 2)
    end = min(total, start + max_visible - 1)
    if end - start < max_visible - 1:
        start = max(1, end - max_visible + 1)
    pages = list(range(start, end + 1))
    if not pages:
        return PageWindow(pages, False, False, False, False)
    return PageWindow(
        pages=pages,
        show_first=pages[0] > 1,
        show_leading_ellipsis=pages[0] > 2,
        show_last=pages[-1] < total,
        show_trailing_ellipsis=pages[-1] < total - 1,
    )
