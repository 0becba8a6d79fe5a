"""FastAPI endpoints for the product review catalog."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.api.schemas import (
    FilterOptionsResponse,
    HealthResponse,
    ProductPageResponse,
    SaveRemarksRequest,
    SaveRemarksResponse,
)
from src.models import get_db
from src.services.catalog_query import (
    CatalogQueryError,
    fetch_catalog_page,
    fetch_filter_options,
    parse_filters,
    parse_pagination,
)
from src.services.moderation import (
    ModerationValidationError,
    RemarkEdit,
    apply_remark_batch,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["review"])

_INTERNAL_ERROR = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/products", response_model=ProductPageResponse)
def list_products(
    page: str | None = None,
    limit: str | None = None,
    category_id: str | None = None,
    brand_id: str | None = None,
    gender: str | None = None,
    db: Session = Depends(get_db),
):
    """Unflagged products matching the filters, one page at a time.

    ``limit`` is capped at MAX_PAGE_SIZE; the applied value is echoed back in
    ``pagination.limit``, which can be smaller than the one requested.
    """
    # Raw strings so malformed page/limit fall back to defaults instead of a 422
    page_num, page_size = parse_pagination(page, limit)
    try:
        filters = parse_filters(category_id, brand_id, gender)
    except CatalogQueryError as exc:
        return _error(400, str(exc))

    try:
        return fetch_catalog_page(db, filters, page_num, page_size)
    except SQLAlchemyError:
        logger.exception("Error fetching products")
        return _error(500, _INTERNAL_ERROR)


@router.get("/filters", response_model=FilterOptionsResponse)
def list_filters(db: Session = Depends(get_db)):
    try:
        return fetch_filter_options(db)
    except SQLAlchemyError:
        logger.exception("Error fetching filters")
        return _error(500, _INTERNAL_ERROR)


@router.post("/products/save-remarks", response_model=SaveRemarksResponse)
def save_remarks(body: SaveRemarksRequest, db: Session = Depends(get_db)):
    edits = [
        RemarkEdit.from_values(item.product_id, item.is_flagged, item.remarks)
        for item in body.products or []
    ]
    try:
        count = apply_remark_batch(db, edits)
    except ModerationValidationError as exc:
        return _error(400, str(exc))
    except SQLAlchemyError:
        # Already rolled back and logged by the batch processor
        return _error(500, _INTERNAL_ERROR)

    return SaveRemarksResponse(success=True, message=f"Updated {count} product(s)")


@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(status="ok")
