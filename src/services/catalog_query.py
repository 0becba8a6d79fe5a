"""Catalog read queries: filtered, paginated product pages and filter options.

Every read excludes flagged products. Filters are expressed as a list of typed
SQLAlchemy clauses, so the page query and its count query are built from the
very same predicates.
"""
import logging
import math
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from config import DEFAULT_PAGE_SIZE, IMAGE_BASE_URL, MAX_PAGE_SIZE
from src.models import Brand, Category, Product, ProductImage

logger = logging.getLogger(__name__)


class CatalogQueryError(ValueError):
    """Raised when a catalog filter value cannot be interpreted."""


@dataclass(frozen=True)
class CatalogFilters:
    """Optional equality filters on the catalog; None means "no constraint"."""

    category_id: Optional[int] = None
    brand_id: Optional[int] = None
    gender: Optional[str] = None

    def predicates(self) -> list:
        """Return the WHERE clauses for these filters (AND-ed by the caller)."""
        clauses = [Product.is_flagged.is_(False)]
        for column, value in (
            (Product.category_id, self.category_id),
            (Product.brand_id, self.brand_id),
            (Category.gender, self.gender),
        ):
            if value is not None:
                clauses.append(column == value)
        return clauses

    def as_params(self) -> dict:
        """Return the supplied filters as request parameters."""
        params = {
            "category_id": self.category_id,
            "brand_id": self.brand_id,
            "gender": self.gender,
        }
        return {k: v for k, v in params.items() if v is not None}


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


def _positive_int(value) -> Optional[int]:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def parse_pagination(page=None, limit=None) -> tuple[int, int]:
    """Coerce raw page/limit values, falling back to page 1 and the default size.

    Non-numeric, missing, zero and negative values are replaced by defaults
    rather than rejected.
    """
    page_num = _positive_int(page) or 1
    page_size = _positive_int(limit) or DEFAULT_PAGE_SIZE
    return page_num, min(page_size, MAX_PAGE_SIZE)


def _optional_id(name: str, value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise CatalogQueryError(f"Invalid {name}: {value!r}") from None


def parse_filters(category_id=None, brand_id=None, gender=None) -> CatalogFilters:
    """Build CatalogFilters from raw request values; blank values are omitted."""
    gender = gender.strip() if isinstance(gender, str) else gender
    return CatalogFilters(
        category_id=_optional_id("category_id", category_id),
        brand_id=_optional_id("brand_id", brand_id),
        gender=gender or None,
    )


def thumbnail_url(storage_path: Optional[str], base_url: str = IMAGE_BASE_URL) -> Optional[str]:
    """Return the public URL of a thumbnail, or None when there is no image."""
    if not storage_path:
        return None
    return f"{base_url}/{storage_path.lstrip('/')}"


def fetch_catalog_page(
    session: Session,
    filters: CatalogFilters | None = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> dict:
    """Return one page of non-flagged products plus pagination metadata.

    Returns
    -------
    dict with keys ``products`` (list of row dicts) and ``pagination``.
    """
    filters = filters or CatalogFilters()
    where = and_(*filters.predicates())

    total = session.execute(
        select(func.count(Product.id))
        .select_from(Product)
        .join(Category, Product.category_id == Category.id)
        .join(Brand, Product.brand_id == Brand.id)
        .where(where)
    ).scalar_one()
    pagination = Pagination(page=page, limit=limit, total=total)

    rows = session.execute(
        select(
            Product.id,
            Product.product_id,
            Product.name,
            Product.is_flagged,
            Product.remarks,
            Category.name.label("category_name"),
            Category.gender,
            Brand.name.label("brand_name"),
            ProductImage.storage_path.label("thumbnail_path"),
        )
        .join(Category, Product.category_id == Category.id)
        .join(Brand, Product.brand_id == Brand.id)
        .outerjoin(
            ProductImage,
            and_(
                ProductImage.product_id == Product.id,
                ProductImage.is_thumbnail.is_(True),
            ),
        )
        .where(where)
        .order_by(Product.id.asc())
        .limit(pagination.limit)
        .offset(pagination.offset)
    ).mappings().all()

    products = []
    for row in rows:
        item = dict(row)
        item["thumbnail_url"] = thumbnail_url(item["thumbnail_path"])
        products.append(item)

    logger.debug(
        "Catalog page %d/%d (%d rows, filters=%s)",
        pagination.page, pagination.total_pages, len(products), filters.as_params(),
    )
    return {"products": products, "pagination": pagination.to_dict()}


def fetch_filter_options(session: Session) -> dict:
    """Return the categories, brands and genders present among non-flagged products."""
    not_flagged = Product.is_flagged.is_(False)

    categories = session.execute(
        select(Category.id, Category.name, Category.gender)
        .join(Product, Product.category_id == Category.id)
        .where(not_flagged)
        .distinct()
        .order_by(Category.gender, Category.name)
    ).mappings().all()

    brands = session.execute(
        select(Brand.id, Brand.name)
        .join(Product, Product.brand_id == Brand.id)
        .where(not_flagged)
        .distinct()
        .order_by(Brand.name)
    ).mappings().all()

    genders = session.execute(
        select(Category.gender)
        .join(Product, Product.category_id == Category.id)
        .where(not_flagged)
        .distinct()
        .order_by(Category.gender)
    ).scalars().all()

    return {
        "categories": [dict(row) for row in categories],
        "brands": [dict(row) for row in brands],
        "genders": list(genders),
    }
