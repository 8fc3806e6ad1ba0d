"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
import strawberry

from catalog_gateway.datasources import TrackAPI
from catalog_gateway.graphql.context import GatewayContext

UPSTREAM_BASE_URL = "https://catalog.test/"


@pytest.fixture
def track_payload() -> dict[str, Any]:
    """A track as the upstream REST API serves it."""
    return {
        "id": "c_0",
        "thumbnail": "https://res.cloudinary.com/dety84pbu/image/upload/v1598465568/nebula_cat_djkt9r.jpg",
        "topic": "Cat-stronomy",
        "authorId": "cat-1",
        "title": "Cat-stronomy, an introduction",
        "description": "Curious to learn what Cat-stronomy is all about?",
        "numberOfViews": 163,
        "createdAt": "2018-09-10T07:13:53.020Z",
        "length": 2377,
        "modulesCount": 10,
        "modules": ["l_0", "l_1", "l_2"],
    }


@pytest.fixture
def author_payload() -> dict[str, Any]:
    return {
        "id": "cat-1",
        "name": "Henri, le Chat Noir",
        "photo": "https://images.unsplash.com/photo-1442291928580-fb5d0856a8f1",
    }


@pytest.fixture
def module_payload() -> dict[str, Any]:
    return {
        "id": "l_0",
        "trackId": "c_0",
        "authorId": "cat-1",
        "topic": "Cat-stronomy",
        "title": "Overview",
        "length": 163,
        "content": "Cat-stronomy is the study of cats in space.",
        "videoUrl": "https://youtu.be/t0hhFXzO1dY",
    }


@pytest.fixture
def mock_track_api() -> AsyncMock:
    """A TrackAPI double whose async methods are AsyncMocks."""
    return AsyncMock(spec=TrackAPI)


@pytest.fixture
def mock_info(mock_track_api: AsyncMock) -> MagicMock:
    """Create a mock GraphQL info object carrying the mocked TrackAPI."""
    info = MagicMock(spec=strawberry.Info)
    info.context = GatewayContext(track_api=mock_track_api)
    return info


@pytest_asyncio.fixture
async def track_api_factory() -> Any:
    """Build TrackAPI instances whose HTTP traffic is answered by a handler function."""
    clients: list[httpx.AsyncClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> TrackAPI:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return TrackAPI(UPSTREAM_BASE_URL, client=client)

    yield factory

    for client in clients:
        await client.aclose()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
