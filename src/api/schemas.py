"""Pydantic request/response schemas for the review API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Catalog ---


class ProductOut(BaseModel):
    id: int
    product_id: int
    name: str
    is_flagged: bool
    remarks: str | None = None
    category_name: str
    gender: str
    brand_name: str
    thumbnail_path: str | None = None
    thumbnail_url: str | None = None


class PaginationOut(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int
    hasNext: bool
    hasPrev: bool


class ProductPageResponse(BaseModel):
    products: list[ProductOut]
    pagination: PaginationOut


class CategoryOption(BaseModel):
    id: int
    name: str
    gender: str


class BrandOption(BaseModel):
    id: int
    name: str


class FilterOptionsResponse(BaseModel):
    categories: list[CategoryOption]
    brands: list[BrandOption]
    genders: list[str]


# --- Moderation ---


class RemarkEditIn(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": 101,
                    "is_flagged": True,
                    "remarks": ["nsfw", "quality_issue"],
                }
            ]
        }
    }

    product_id: int
    is_flagged: bool
    remarks: list[str] = Field(default_factory=list)


class SaveRemarksRequest(BaseModel):
    products: list[RemarkEditIn] | None = None


class SaveRemarksResponse(BaseModel):
    success: bool
    message: str


class HealthResponse(BaseModel):
    status: str
