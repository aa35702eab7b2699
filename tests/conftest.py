from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.main import app, lifespan
from app.models.employee import Enrichment


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _offline_settings():
    from app.core.config import settings

    original = settings.ENRICHMENT_ENABLED
    settings.ENRICHMENT_ENABLED = False
    yield
    settings.ENRICHMENT_ENABLED = original


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def enriched_client():
    """Client whose enrichment returns fixed values instead of calling out."""
    with TestClient(app) as c:
        enrichment = app.state.employee_service.enrichment
        enrichment.enrich = AsyncMock(
            return_value=Enrichment(
                picture_url="https://picsum.photos/id/237/450",
                quote="Stay hungry, stay foolish.",
            )
        )
        yield c


@pytest.fixture
async def async_client():
    async with lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac


def make_payload(**overrides) -> dict:
    employee = {
        "firstName": "John",
        "lastName": "Smith",
        "hireDate": "2020-01-01",
        "role": "manager",
    }
    employee.update(overrides)
    return {"employee": employee}


def future_date(days: int = 30) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def mock_response(status: int = 200, json_data=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=json_data)
    response.text = AsyncMock(return_value=text)
    return response


def mock_session(responses: dict[str, MagicMock]) -> MagicMock:
    """Session whose ``get`` answers each URL with the response mapped to it."""

    def _get(url, **kwargs):
        if url not in responses:
            raise AssertionError(f"unexpected GET {url}")
        context = AsyncMock()
        context.__aenter__.return_value = responses[url]
        context.__aexit__.return_value = None
        return context

    session = MagicMock()
    session.get.side_effect = _get
    session.close = AsyncMock()
    return session
