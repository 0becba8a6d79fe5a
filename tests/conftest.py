import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.api import router
from src.models import Brand, Category, Product, ProductImage, get_db, init_db


@pytest.fixture()
def engine():
    """A fresh in-memory database per test, shared by every connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    app = FastAPI()
    app.include_router(router)

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    return TestClient(app)


@pytest.fixture()
def catalog(db):
    """Factory that adds products (and their category/brand on first use)."""
    categories: dict = {}
    brands: dict = {}

    def _category(name, gender):
        key = (name, gender)
        if key not in categories:
            categories[key] = Category(name=name, gender=gender)
            db.add(categories[key])
            db.flush()
        return categories[key]

    def _brand(name):
        if name not in brands:
            brands[name] = Brand(name=name)
            db.add(brands[name])
            db.flush()
        return brands[name]

    def _add(
        product_id,
        name=None,
        category="Dresses",
        gender="women",
        brand="Acme",
        thumbnail=None,
        is_flagged=False,
        remarks=None,
    ):
        product = Product(
            product_id=product_id,
            name=name or f"Product {product_id}",
            category=_category(category, gender),
            brand=_brand(brand),
            is_flagged=is_flagged,
            remarks=remarks,
        )
        db.add(product)
        db.flush()
        if thumbnail:
            db.add(ProductImage(product_id=product.id, storage_path=thumbnail, is_thumbnail=True))
        db.commit()
        return product

    _add.category = _category
    _add.brand = _brand
    return _add
