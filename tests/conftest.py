"""
Pytest configuration: the app runs against an in-memory SQLite database.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import cafe_backoffice.models  # noqa: F401
from cafe_backoffice.db.base import Base
from cafe_backoffice.db.deps import get_async_session
from cafe_backoffice.main import app

PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00"
    b"\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\xff\xff?\x00\x05\xfe\x02\xfe\xa7\x35\x81\x84"
    b"\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
async def engine():
    """Fresh in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    """Session for direct CRUD-level checks."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client bound to the app, with the session dependency overridden."""

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def employee_payload():
    return {
        "name": "Anna Kowalska",
        "login": "anna",
        "position": "Cook",
        "workplace": "Kitchen",
        "hourlyRate": 32.5,
    }


@pytest.fixture
async def employee(client, employee_payload):
    """An employee created through the API."""
    response = await client.post("/api/employees", json=employee_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product_form():
    return {
        "name": "Tomatoes",
        "category": "Vegetables",
        "unit": "kg",
        "pricePerUnit": "7.5",
        "supplier": "Green Farm",
        "demand": '{"monday": 5, "friday": 12.5}',
        "scheduleDays": '["monday", "friday"]',
    }


@pytest.fixture
async def product(client, product_form, png_bytes):
    """A product created through the API, with a PNG image."""
    response = await client.post(
        "/api/products",
        data=product_form,
        files={"image": ("tomato.png", png_bytes, "image/png")},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def png_bytes():
    return PNG_BYTES
