"""Pytest fixtures for testing."""

from collections.abc import AsyncGenerator
from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from main import app
from simplefin_rotki.schemas.simplefin import Organization
from simplefin_rotki.services import token_codec

ROTKI_URL = "http://localhost:8080"


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient]:
    """Create a test client bound to the ASGI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def rotki_token() -> str:
    """Bridge token for the test Rotki backend."""
    return token_codec.encode(ROTKI_URL.encode("utf-8"))


@pytest.fixture
def organization() -> Organization:
    return Organization(domain=None, name="Rotki", sfin_url="https://bridge.example.com")


@pytest.fixture
def rotki_payload() -> dict[str, Any]:
    """A Rotki /api/1/balances body, numbers already parsed as Decimal."""
    return {
        "result": {
            "assets": {},
            "liabilities": {},
            "location": {
                "banks": {"percentage_of_net_value": "60.00%", "usd_value": Decimal("1500.10")},
                "kraken": {"percentage_of_net_value": "40.00%", "usd_value": Decimal("1000.005")},
            },
            "net_usd": Decimal("2500.105"),
        },
        "message": "",
    }


def _mock_httpx_client(
    payload: Any = None,
    *,
    get_side_effect: BaseException | None = None,
    raise_for_status_side_effect: BaseException | None = None,
    json_side_effect: BaseException | None = None,
) -> MagicMock:
    """Build a stand-in for ``httpx.AsyncClient`` used as an async context manager."""
    mock_response = MagicMock()
    mock_response.raise_for_status = MagicMock(side_effect=raise_for_status_side_effect)
    mock_response.json = MagicMock(return_value=payload, side_effect=json_side_effect)

    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    mock_client.get = AsyncMock(return_value=mock_response, side_effect=get_side_effect)
    return mock_client


@pytest.fixture
def mock_httpx_client():
    """Factory for mocked ``httpx.AsyncClient`` instances."""
    return _mock_httpx_client
