"""
Tests for employees, login/logout and admin seeding.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from cafe_backoffice.models import Employee


class TestEmployeeCreate:
    """Tests for POST /api/employees."""

    async def test_create_returns_camel_case_record(self, client, employee_payload):
        """Created employee is returned with camelCase fields and default role."""
        response = await client.post("/api/employees", json=employee_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["login"] == "anna"
        assert data["hourlyRate"] == 32.5
        assert data["role"] == "employee"
        assert "createdAt" in data

    async def test_duplicate_login_conflicts_and_keeps_count(self, client, employee, employee_payload):
        """A taken login yields 409 and no new record."""
        response = await client.post("/api/employees", json={**employee_payload, "name": "Other Anna"})

        assert response.status_code == 409
        employees = (await client.get("/api/employees")).json()
        assert len(employees) == 1
        assert employees[0]["name"] == "Anna Kowalska"

    async def test_duplicate_login_is_case_insensitive(self, client, employee, employee_payload):
        """ANNA and anna are the same login."""
        response = await client.post("/api/employees", json={**employee_payload, "login": "ANNA"})

        assert response.status_code == 409

    async def test_unique_index_guards_against_bypassed_check(self, db, employee):
        """The database itself rejects a second record with the same login."""
        db.add(Employee(name="Race", login="Anna", position="Cook", workplace="Kitchen", hourly_rate=1))

        with pytest.raises(IntegrityError):
            await db.commit()
        await db.rollback()

        count = await db.scalar(select(func.count(Employee.id)))
        assert count == 1

    @pytest.mark.parametrize("missing", ["name", "login", "position", "workplace", "hourlyRate"])
    async def test_missing_required_field_is_rejected(self, client, employee_payload, missing):
        """Every required field missing yields 400."""
        payload = {k: v for k, v in employee_payload.items() if k != missing}

        response = await client.post("/api/employees", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == "Validation error"
        assert any(error["loc"][-1] == missing for error in response.json()["errors"])

    async def test_negative_hourly_rate_is_rejected(self, client, employee_payload):
        response = await client.post("/api/employees", json={**employee_payload, "hourlyRate": -1})

        assert response.status_code == 400


class TestEmployeeUpdate:
    """Tests for PUT /api/employees/{id}."""

    async def test_partial_update_changes_only_given_fields(self, client, employee):
        response = await client.put(f"/api/employees/{employee['id']}", json={"hourlyRate": 40})

        assert response.status_code == 200
        data = response.json()
        assert data["hourlyRate"] == 40
        assert data["position"] == "Cook"

    async def test_update_missing_employee_returns_404(self, client):
        response = await client.put("/api/employees/999", json={"position": "Chef"})

        assert response.status_code == 404

    async def test_update_to_taken_login_conflicts(self, client, employee, employee_payload):
        other = await client.post("/api/employees", json={**employee_payload, "login": "bob", "name": "Bob"})

        response = await client.put(f"/api/employees/{other.json()['id']}", json={"login": "Anna"})

        assert response.status_code == 409

    async def test_unknown_field_is_rejected(self, client, employee):
        response = await client.put(f"/api/employees/{employee['id']}", json={"salary": 1})

        assert response.status_code == 400


class TestLogin:
    """Tests for POST /api/login and /api/logout."""

    async def test_login_returns_employee_and_marks_active(self, client, employee):
        response = await client.post("/api/login", json={"login": "anna"})

        assert response.status_code == 200
        assert response.json()["id"] == employee["id"]

        sessions = (await client.get("/api/active-sessions")).json()
        assert [s["login"] for s in sessions] == ["anna"]

    async def test_login_is_case_insensitive(self, client, employee):
        response = await client.post("/api/login", json={"login": "  ANNA "})

        assert response.status_code == 200
        assert response.json()["login"] == "anna"

    async def test_repeated_login_keeps_single_active_session(self, client, employee):
        await client.post("/api/login", json={"login": "anna"})
        await client.post("/api/login", json={"login": "Anna"})

        sessions = (await client.get("/api/active-sessions")).json()
        assert len(sessions) == 1

    async def test_unknown_login_returns_401(self, client, employee):
        response = await client.post("/api/login", json={"login": "nobody"})

        assert response.status_code == 401
        assert (await client.get("/api/active-sessions")).json() == []

    @pytest.mark.parametrize("payload", [{}, {"login": ""}, {"login": "   "}])
    async def test_missing_login_returns_400(self, client, payload):
        response = await client.post("/api/login", json=payload)

        assert response.status_code == 400

    async def test_logout_removes_active_session(self, client, employee):
        await client.post("/api/login", json={"login": "anna"})

        response = await client.post("/api/logout", json={"login": "anna"})

        assert response.status_code == 200
        assert response.json() == {"ok": True, "removed": True}
        assert (await client.get("/api/active-sessions")).json() == []

    async def test_logout_without_session(self, client):
        response = await client.post("/api/logout", json={"login": "anna"})

        assert response.json()["removed"] is False


class TestSetupAdmins:
    """Tests for GET /api/setup-admins."""

    async def test_creates_admin_accounts_once(self, client):
        first = await client.get("/api/setup-admins")
        second = await client.get("/api/setup-admins")

        assert first.status_code == 200
        assert sorted(first.json()["created"]) == ["admin", "manager"]
        assert second.json()["created"] == []
        assert sorted(second.json()["existing"]) == ["admin", "manager"]

        employees = (await client.get("/api/employees")).json()
        roles = {e["login"]: e["role"] for e in employees}
        assert roles == {"admin": "admin", "manager": "manager"}

    async def test_skips_existing_login(self, client, employee_payload):
        await client.post("/api/employees", json={**employee_payload, "login": "Admin"})

        response = await client.get("/api/setup-admins")

        assert response.json() == {"created": ["manager"], "existing": ["admin"]}
