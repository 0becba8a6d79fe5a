"""Integration tests for the review API endpoints."""

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from config import MAX_PAGE_SIZE
from src.models import Product


def _boom(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("connection lost"))


class TestListProducts:
    def test_default_page(self, client, catalog):
        catalog(1, thumbnail="products/1.jpg")
        catalog(2)

        response = client.get("/api/products")
        assert response.status_code == 200
        data = response.json()
        assert [p["product_id"] for p in data["products"]] == [1, 2]
        assert data["pagination"] == {
            "page": 1, "limit": 50, "total": 2,
            "totalPages": 1, "hasNext": False, "hasPrev": False,
        }
        assert data["products"][0]["thumbnail_url"].endswith("/products/1.jpg")
        assert data["products"][1]["thumbnail_url"] is None

    def test_invalid_paging_falls_back_to_defaults(self, client, catalog):
        catalog(1)
        response = client.get("/api/products", params={"page": "abc", "limit": "x"})
        assert response.status_code == 200
        pagination = response.json()["pagination"]
        assert pagination["page"] == 1
        assert pagination["limit"] == 50

    def test_limit_is_capped_and_reported(self, client, catalog):
        catalog(1)
        response = client.get("/api/products", params={"limit": MAX_PAGE_SIZE + 1})
        assert response.status_code == 200
        assert response.json()["pagination"]["limit"] == MAX_PAGE_SIZE

    def test_filters(self, client, catalog):
        catalog(1, gender="women", category="Dresses")
        catalog(2, gender="men", category="Shirts")
        shirts = catalog.category("Shirts", "men")

        by_gender = client.get("/api/products", params={"gender": "men"}).json()
        by_category = client.get("/api/products", params={"category_id": shirts.id}).json()
        empty_filter = client.get("/api/products", params={"gender": ""}).json()

        assert [p["product_id"] for p in by_gender["products"]] == [2]
        assert [p["product_id"] for p in by_category["products"]] == [2]
        assert empty_filter["pagination"]["total"] == 2

    def test_non_numeric_filter_id(self, client):
        response = client.get("/api/products", params={"brand_id": "acme"})
        assert response.status_code == 400
        assert "brand_id" in response.json()["error"]

    def test_page_beyond_last(self, client, catalog):
        catalog(1)
        response = client.get("/api/products", params={"page": 5})
        assert response.status_code == 200
        data = response.json()
        assert data["products"] == []
        assert data["pagination"]["totalPages"] == 1
        assert data["pagination"]["hasNext"] is False

    def test_storage_failure_is_opaque(self, client, monkeypatch):
        monkeypatch.setattr("src.api.routes.fetch_catalog_page", _boom)
        response = client.get("/api/products")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestListFilters:
    def test_options(self, client, catalog):
        catalog(1, category="Dresses", gender="women", brand="Acme")
        catalog(2, category="Hats", gender="kids", brand="Gone", is_flagged=True, remarks="nsfw")

        data = client.get("/api/filters").json()
        assert [c["name"] for c in data["categories"]] == ["Dresses"]
        assert set(data["categories"][0]) == {"id", "name", "gender"}
        assert data["brands"] == [{"id": catalog.brand("Acme").id, "name": "Acme"}]
        assert data["genders"] == ["women"]

    def test_storage_failure_is_opaque(self, client, monkeypatch):
        monkeypatch.setattr("src.api.routes.fetch_filter_options", _boom)
        response = client.get("/api/filters")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestSaveRemarks:
    def test_saves_and_excludes_from_catalog(self, client, db, catalog):
        catalog(100)
        catalog(101)

        response = client.post("/api/products/save-remarks", json={
            "products": [
                {"product_id": 101, "is_flagged": True, "remarks": ["nsfw", "quality_issue"]},
            ],
        })

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Updated 1 product(s)"}
        stored = db.query(Product).filter_by(product_id=101).one()
        assert stored.is_flagged is True
        assert stored.remarks == "nsfw,quality_issue"

        ids = [p["product_id"] for p in client.get("/api/products").json()["products"]]
        assert ids == [100]

    def test_message_counts_submitted_edits(self, client, catalog):
        catalog(1)
        response = client.post("/api/products/save-remarks", json={
            "products": [
                {"product_id": 1, "is_flagged": True, "remarks": ["pose_issue"]},
                {"product_id": 404, "is_flagged": True, "remarks": ["nsfw"]},
            ],
        })
        assert response.status_code == 200
        assert response.json()["message"] == "Updated 2 product(s)"

    def test_empty_batch_is_rejected(self, client, monkeypatch):
        def _must_not_run(*args, **kwargs):
            raise AssertionError("storage touched")

        monkeypatch.setattr("src.services.moderation.update", _must_not_run)
        for body in ({"products": []}, {}):
            response = client.post("/api/products/save-remarks", json=body)
            assert response.status_code == 400
            assert response.json() == {"error": "Products array is required"}

    def test_malformed_items_are_rejected(self, client):
        response = client.post("/api/products/save-remarks", json={"products": [{"remarks": []}]})
        assert response.status_code == 422

    def test_duplicate_and_unknown_tags_are_dropped(self, client, db, catalog):
        catalog(1)
        client.post("/api/products/save-remarks", json={
            "products": [
                {"product_id": 1, "is_flagged": True, "remarks": ["nsfw", "nsfw", "shiny", "pose_issue"]},
            ],
        })
        assert db.query(Product).filter_by(product_id=1).one().remarks == "nsfw,pose_issue"

    def test_flagged_without_valid_remarks_is_rejected(self, client, db, catalog, monkeypatch):
        catalog(1)
        catalog(2)

        def _must_not_run(*args, **kwargs):
            raise AssertionError("storage touched")

        monkeypatch.setattr("src.services.moderation.update", _must_not_run)
        response = client.post("/api/products/save-remarks", json={
            "products": [
                {"product_id": 1, "is_flagged": True, "remarks": ["nsfw"]},
                {"product_id": 2, "is_flagged": True, "remarks": ["blurry"]},
            ],
        })
        assert response.status_code == 400
        assert response.json() == {"error": "Product 2 is flagged but has no valid remarks"}
        assert db.query(Product).filter_by(is_flagged=True).count() == 0

    def test_failure_rolls_back_whole_batch(self, client, db, catalog, monkeypatch):
        catalog(1)
        catalog(2)
        real_execute = Session.execute
        calls = []

        def _fail_on_second(self, statement, *args, **kwargs):
            calls.append(statement)
            if len(calls) == 2:
                raise OperationalError("UPDATE products", {}, Exception("disk I/O error"))
            return real_execute(self, statement, *args, **kwargs)

        monkeypatch.setattr(Session, "execute", _fail_on_second)
        response = client.post("/api/products/save-remarks", json={
            "products": [
                {"product_id": 1, "is_flagged": True, "remarks": ["nsfw"]},
                {"product_id": 2, "is_flagged": True, "remarks": ["pose_issue"]},
            ],
        })
        monkeypatch.undo()

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        db.expire_all()
        assert db.query(Product).filter_by(is_flagged=True).count() == 0


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
