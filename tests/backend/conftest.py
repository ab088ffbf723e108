import os
import uuid

TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-hs256-signing-0123456789")
# Low cost factor keeps the suite fast; production default is 12
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from hotel_booking.core import db as db_module
from hotel_booking.core.security import hash_password
from hotel_booking.main import app
from hotel_booking.models.hotel import Hotel
from hotel_booking.models.user import User

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """
    Fresh database for service-level tests that don't need HTTP.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    Startup hooks are not run; the db fixture has already initialised Tortoise.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_user(db):
    """
    Factory fixture to create users directly via ORM.
    """

    async def _create_user(password: str = "UserPass!23", email: str | None = None) -> tuple[User, str]:
        user = await User.create(
            email=email or f"{uuid.uuid4().hex[:8]}@example.com",
            password=hash_password(password),
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def create_hotel(db):
    async def _create_hotel(name: str = "Seaside Inn", **extra) -> Hotel:
        return await Hotel.create(name=name, **extra)

    return _create_hotel


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    The raw token is sent as the whole header value, as clients do.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post("/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": resp.json()["token"]}

    return _get_headers
