"""Services package."""
from src.services.catalog_client import CatalogClient, CatalogClientError
from src.services.catalog_query import (
    CatalogFilters,
    CatalogQueryError,
    fetch_catalog_page,
    fetch_filter_options,
    parse_filters,
    parse_pagination,
)
from src.services.moderation import ModerationValidationError, RemarkEdit, apply_remark_batch
from src.services.remark_tracker import PendingEdit, RemarkTracker
from src.services.remarks import REMARK_LABELS, RemarkTag, decode_remarks, encode_remarks
from src.services.review_session import NothingToSaveError, ReviewSession, page_window

__all__ = [
    "CatalogClient",
    "CatalogClientError",
    "CatalogFilters",
    "CatalogQueryError",
    "fetch_catalog_page",
    "fetch_filter_options",
    "parse_filters",
    "parse_pagination",
    "ModerationValidationError",
    "RemarkEdit",
    "apply_remark_batch",
    "PendingEdit",
    "RemarkTracker",
    "REMARK_LABELS",
    "RemarkTag",
    "decode_remarks",
    "encode_remarks",
    "NothingToSaveError",
    "ReviewSession",
    "page_window",
]
