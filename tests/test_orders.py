"""
Tests for order submission and bulk clearing.
"""

import pytest


@pytest.fixture
def order_payload():
    return {
        "orderedBy": "anna",
        "totalPrice": 37.5,
        "items": [
            {
                "productId": 1,
                "name": "Tomatoes",
                "quantity": 5,
                "unit": "kg",
                "priceAtOrder": 7.5,
                "day": "monday",
            },
        ],
    }


class TestOrderCreate:
    """Tests for POST /api/orders."""

    async def test_create_returns_order_with_items(self, client, order_payload):
        response = await client.post("/api/orders", json=order_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["orderedBy"] == "anna"
        assert data["totalPrice"] == 37.5
        assert data["createdAt"]
        assert len(data["items"]) == 1
        item = data["items"][0]
        assert item["productId"] == 1
        assert item["priceAtOrder"] == 7.5
        assert item["day"] == "monday"

    async def test_ordered_by_defaults_to_sentinel(self, client, order_payload):
        del order_payload["orderedBy"]

        response = await client.post("/api/orders", json=order_payload)

        assert response.json()["orderedBy"] == "unknown"

    async def test_total_is_not_recomputed(self, client, order_payload):
        """The submitted total is stored as is."""
        response = await client.post("/api/orders", json={**order_payload, "totalPrice": 1})

        assert response.json()["totalPrice"] == 1

    @pytest.mark.parametrize(
        "change",
        [
            {"items": []},
            {"items": None},
            {"totalPrice": None},
            {"totalPrice": 0},
        ],
    )
    async def test_empty_items_or_missing_total_rejected(self, client, order_payload, change):
        payload = {**order_payload, **change}
        payload = {k: v for k, v in payload.items() if v is not None}

        response = await client.post("/api/orders", json=payload)

        assert response.status_code == 400
        assert (await client.get("/api/orders")).json() == []

    async def test_validation_error_lists_offending_fields(self, client, order_payload):
        del order_payload["totalPrice"]

        response = await client.post("/api/orders", json=order_payload)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation error"
        assert "detail" not in body
        assert [error["loc"][-1] for error in body["errors"]] == ["totalPrice"]

    async def test_total_keeps_cents(self, client, order_payload):
        """Money is stored with two decimal places, without float drift."""
        response = await client.post("/api/orders", json={**order_payload, "totalPrice": 0.1 + 0.2})

        order = (await client.get(f"/api/orders/{response.json()['id']}")).json()
        assert order["totalPrice"] == 0.3

    async def test_zero_quantity_rejected(self, client, order_payload):
        order_payload["items"][0]["quantity"] = 0

        response = await client.post("/api/orders", json=order_payload)

        assert response.status_code == 400


class TestOrderRead:
    """Tests for listing and fetching orders."""

    async def test_list_is_newest_first(self, client, order_payload):
        first = (await client.post("/api/orders", json=order_payload)).json()
        second = (await client.post("/api/orders", json=order_payload)).json()

        ids = [o["id"] for o in (await client.get("/api/orders")).json()]

        assert ids == [second["id"], first["id"]]

    async def test_get_by_id(self, client, order_payload):
        created = (await client.post("/api/orders", json=order_payload)).json()

        response = await client.get(f"/api/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json()["items"][0]["name"] == "Tomatoes"

    async def test_get_missing_returns_404(self, client):
        assert (await client.get("/api/orders/5")).status_code == 404


class TestOrderBulkDelete:
    """Tests for DELETE /api/orders/all."""

    async def test_deletes_every_order(self, client, order_payload):
        await client.post("/api/orders", json=order_payload)
        await client.post("/api/orders", json=order_payload)

        response = await client.delete("/api/orders/all")

        assert response.status_code == 200
        assert response.json() == {"deleted": 2}
        assert (await client.get("/api/orders")).json() == []

    async def test_on_empty_collection(self, client):
        response = await client.delete("/api/orders/all")

        assert response.json() == {"deleted": 0}
