"""Database models package."""
from src.models.database import Base, engine, SessionLocal, get_db, with_db, init_db
from src.models.brand import Brand
from src.models.category import Category
from src.models.product import Product
from src.models.product_image import ProductImage

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "with_db",
    "init_db",
    "Brand",
    "Category",
    "Product",
    "ProductImage",
]
