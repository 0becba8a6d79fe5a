"""HTTP client for the review API, used by the reviewer UI."""
import logging
from typing import Optional

import requests

from config import API_BASE_URL, API_TIMEOUT, DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)


class CatalogClientError(Exception):
    """Raised when a request to the review API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CatalogClient:
    """Thin requests wrapper around the catalog and moderation endpoints.

    Nothing is retried; a failed call raises CatalogClientError and the caller
    decides whether to try again.
    """

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = API_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fetch_products(
        self,
        filters: dict | None = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> dict:
        """Fetch one catalog page; empty filter values are not sent."""
        params = {"page": page, "limit": limit}
        for key, value in (filters or {}).items():
            if value is None or value == "":
                continue
            params[key] = value
        return self._request("GET", "/products", params=params)

    def fetch_filters(self) -> dict:
        """Fetch the category/brand/gender options for the filter bar."""
        return self._request("GET", "/filters")

    def save_remarks(self, batch: list[dict]) -> dict:
        """Submit a batch of ``{product_id, is_flagged, remarks}`` edits."""
        return self._request("POST", "/products/save-remarks", json={"products": batch})

    def health(self) -> bool:
        """Return True if the API answers its liveness probe."""
        try:
            return self._request("GET", "/health").get("status") == "ok"
        except CatalogClientError:
            return False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.base_url}{path}"
        try:
            resp = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise CatalogClientError(f"Could not reach the review API: {exc}") from exc

        if not resp.ok:
            message = _error_message(resp)
            logger.warning("%s %s returned %d: %s", method, url, resp.status_code, message)
            raise CatalogClientError(message, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise CatalogClientError(
                f"Invalid response from {path}", status_code=resp.status_code
            ) from exc


def _error_message(resp) -> str:
    """Extract the ``error`` field of an API error body, if there is one."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed with status {resp.status_code}"
