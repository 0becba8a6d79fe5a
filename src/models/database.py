"""Database engine, session factory, and base model."""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from config import DATABASE_URL

logger = logging.getLogger(__name__)

# SQLite connections are shared across the API worker threads
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=False, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    pass


@contextmanager
def with_db():
    """Context manager that yields a DB session and auto-closes it.

    Usage::

        with with_db() as db:
            products = db.query(Product).all()
        # session is closed automatically, even on exception
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_db():
    """FastAPI dependency: one session per request, closed afterwards."""
    with with_db() as session:
        yield session


def _migrate_columns(bind=None):
    """Add moderation columns to a pre-existing products table if missing."""
    bind = bind or engine
    inspector = inspect(bind)
    if "products" not in inspector.get_table_names():
        return
    columns = {col["name"] for col in inspector.get_columns("products")}
    if "is_flagged" not in columns:
        logger.info("Adding is_flagged column to products table")
        with bind.begin() as conn:
            conn.execute(text(
                "ALTER TABLE products ADD COLUMN is_flagged BOOLEAN NOT NULL DEFAULT FALSE"
            ))
    if "remarks" not in columns:
        logger.info("Adding remarks column to products table")
        with bind.begin() as conn:
            conn.execute(text(
                "ALTER TABLE products ADD COLUMN remarks TEXT"
            ))
    if "updated_at" not in columns:
        logger.info("Adding updated_at column to products table")
        with bind.begin() as conn:
            conn.execute(text(
                "ALTER TABLE products ADD COLUMN updated_at TIMESTAMP"
            ))


def _migrate_indexes(bind=None):
    """Create indexes on FK and filter columns for existing databases."""
    _indexes = [
        ("ix_products_category_id", "products", "category_id"),
        ("ix_products_brand_id", "products", "brand_id"),
        ("ix_products_is_flagged", "products", "is_flagged"),
        ("ix_product_images_product_id", "product_images", "product_id"),
    ]
    bind = bind or engine
    inspector = inspect(bind)
    tables = inspector.get_table_names()
    with bind.begin() as conn:
        for idx_name, table, column in _indexes:
            if table not in tables:
                continue
            existing = {idx["name"] for idx in inspector.get_indexes(table)}
            if idx_name not in existing:
                logger.info("Creating index %s on %s.%s", idx_name, table, column)
                conn.execute(text(
                    f"CREATE INDEX IF NOT EXISTS {idx_name} ON {table} ({column})"
                ))


def init_db(bind=None):
    """Create all tables defined by Base subclasses, then bring old schemas up to date."""
    # Import all models so they register with Base.metadata
    import src.models.brand  # noqa: F401
    import src.models.category  # noqa: F401
    import src.models.product  # noqa: F401
    import src.models.product_image  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    _migrate_columns(bind)
    _migrate_indexes(bind)
