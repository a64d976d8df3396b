"""
Tests for the aggregate snapshot, activity log, supporting collections,
seeding and static pages.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from cafe_backoffice.crud.snapshot import load_snapshot
from cafe_backoffice.models import Employee, MenuItem, Product


class TestDataSnapshot:
    """Tests for GET /api/data."""

    async def test_contains_every_collection(self, client, employee, product):
        await client.post("/api/login", json={"login": "anna"})

        response = await client.get("/api/data")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {
            "users", "products", "orders", "reservations", "categories",
            "holidays", "workSessions", "activeSessions", "logs", "menuItems",
        }
        assert [u["login"] for u in data["users"]] == ["anna"]
        assert [p["name"] for p in data["products"]] == ["Tomatoes"]
        assert [s["login"] for s in data["activeSessions"]] == ["anna"]


class TestActivityLog:
    """Tests for GET /api/logs."""

    async def test_actions_are_recorded_newest_first(self, client, employee):
        await client.post("/api/login", json={"login": "anna"})

        logs = (await client.get("/api/logs")).json()

        assert [entry["action"] for entry in logs] == ["login", "employee_created"]
        assert logs[0]["actor"] == "anna"

    async def test_actor_header_is_used(self, client):
        await client.post("/api/categories", json={"name": "Drinks"})
        await client.post(
            "/api/menu",
            json={"name": "Tea", "category": "Drinks", "price": 5},
            headers={"X-Employee-Login": "manager"},
        )

        logs = (await client.get("/api/logs", params={"limit": 1})).json()

        assert logs[0]["actor"] == "manager"
        assert logs[0]["details"]["name"] == "Tea"


class TestCategoriesAndHolidays:
    """Tests for /api/categories and /api/holidays."""

    async def test_category_lifecycle(self, client):
        created = await client.post("/api/categories", json={"name": "Vegetables"})
        duplicate = await client.post("/api/categories", json={"name": "Vegetables"})

        assert created.status_code == 201
        assert duplicate.status_code == 409
        assert (await client.delete(f"/api/categories/{created.json()['id']}")).status_code == 204
        assert (await client.delete(f"/api/categories/{created.json()['id']}")).status_code == 404

    async def test_holidays_sorted_and_unique_by_date(self, client):
        await client.post("/api/holidays", json={"date": "2026-12-25", "name": "Christmas"})
        await client.post("/api/holidays", json={"date": "2026-11-11", "name": "Independence Day"})
        duplicate = await client.post("/api/holidays", json={"date": "2026-12-25", "name": "Again"})

        holidays = (await client.get("/api/holidays")).json()

        assert duplicate.status_code == 409
        assert [h["date"] for h in holidays] == ["2026-11-11", "2026-12-25"]


class TestLoadSnapshot:
    """Tests for seeding from a snapshot."""

    @pytest.fixture
    def snapshot(self):
        return {
            "users": [
                {"name": "Anna", "login": "anna", "position": "Cook", "workplace": "Kitchen", "hourlyRate": 30},
            ],
            "products": [
                {
                    "name": "Milk",
                    "category": "Dairy",
                    "unit": "liter",
                    "pricePerUnit": 4.2,
                    "supplier": "Farm",
                    "image": "data:image/png;base64,AAAA",
                },
            ],
            "menuItems": [{"name": "Latte", "category": "Coffee", "price": 14}],
        }

    async def test_loads_collections(self, db, snapshot):
        counts = await load_snapshot(db, snapshot)

        assert counts == {"users": 1, "products": 1, "menuItems": 1}
        assert await db.scalar(select(func.count(Product.id))) == 1
        assert await db.scalar(select(func.count(MenuItem.id))) == 1

    async def test_replace_drops_existing_rows(self, db, snapshot):
        await load_snapshot(db, snapshot)

        await load_snapshot(db, {"menuItems": [{"name": "Espresso", "category": "Coffee", "price": 9}]}, replace=True)

        names = (await db.execute(select(MenuItem.name))).scalars().all()
        assert names == ["Espresso"]

    async def test_invalid_record_writes_nothing(self, db, snapshot):
        snapshot["menuItems"].append({"name": "Broken", "category": "Coffee", "price": -1})

        with pytest.raises(ValidationError):
            await load_snapshot(db, snapshot)

        assert await db.scalar(select(func.count(Employee.id))) == 0

    async def test_failed_write_rolls_back_everything(self, db, snapshot):
        snapshot["users"].append(dict(snapshot["users"][0], name="Second Anna"))

        with pytest.raises(IntegrityError):
            await load_snapshot(db, snapshot)

        assert await db.scalar(select(func.count(Product.id))) == 0
        assert await db.scalar(select(func.count(MenuItem.id))) == 0


class TestPages:
    """Tests for static pages and health check."""

    @pytest.mark.parametrize("path,marker", [("/", "Book a table"), ("/system", "Management panel"), ("/menu", "Menu")])
    async def test_pages_are_html(self, client, path, marker):
        response = await client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert marker in response.text

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.json()["status"] == "ok"
