"""Pytest fixtures for sqs-message-channel tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123/my-queue"


@pytest.fixture
def queue_url() -> str:
    return QUEUE_URL


@pytest.fixture
def mock_client() -> MagicMock:
    client = MagicMock()
    client.send_message = AsyncMock(return_value={"MessageId": "m-1"})
    client.receive_message = AsyncMock(return_value={})
    client.delete_message = AsyncMock(return_value={})
    return client


@pytest.fixture
def mock_connection(mock_client: MagicMock) -> MagicMock:
    conn = MagicMock()
    conn.get_client = AsyncMock(return_value=mock_client)
    conn.health_check = AsyncMock(return_value=True)
    return conn
