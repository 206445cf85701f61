"""Pytest configuration for hue-bridge-client tests."""

import httpx
import pytest
import pytest_asyncio

from hue_bridge_client import Client

from .fakes import RecordingTransport
from .mock_server import FAKE_USERNAME, create_app


@pytest.fixture
def recording_transport():
    """Recording transport answering every request with an empty list."""
    return RecordingTransport(default=[])


@pytest.fixture
def fake_client(recording_transport):
    """Client wired to the recording transport."""
    return Client(host="10.0.0.5", username="abc", transport=recording_transport)


@pytest.fixture
def bridge_app():
    """Mock bridge app with the link button pressed."""
    return create_app(link_button=True)


@pytest_asyncio.fixture
async def bridge_client(bridge_app):
    """Client talking HTTP to the in-process mock bridge."""
    async with Client(
        host="bridge.local",
        username=FAKE_USERNAME,
        http_transport=httpx.ASGITransport(app=bridge_app),
    ) as client:
        yield client
