from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import membership, user  # noqa: F401
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "password_hash_schemes": "pbkdf2_sha256",
        }
    )


@pytest.fixture()
def password_hasher(test_settings: Settings) -> PasswordHasher:
    return PasswordHasher(test_settings.password_hash_schemes_tuple)


@pytest.fixture()
def app(test_settings: Settings, password_hasher: PasswordHasher):
    return create_app(settings=test_settings, password_hasher=password_hasher)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()


@pytest.fixture()
async def registered_user(client: AsyncClient) -> dict:
    response = await client.post(
        "/api/v1/users",
        json={
            "email": "user@example.com",
            "password": "s3cret-pass",
            "name": "Ada Member",
            "phone": "+1 555 0100",
            "address": "1 Main St",
            "dob": "1990-04-01",
        },
    )
    assert response.status_code == 201
    return response.json()
