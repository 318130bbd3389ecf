"""Unit tests for SQSConnectionManager with mocked aiobotocore (no real AWS)."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from sqs_channel.message import Message
from sqs_channel.primitives.exceptions import MessagingConnectionError
from sqs_channel.sqs.channel import QueueMessageChannel
from sqs_channel.sqs.connection import SQSConnectionManager

ORDERS_URL = "https://sqs.eu-west-1.amazonaws.com/123/orders"


class NonExistentQueue(Exception):  # noqa: N818
    response = {"Error": {"Code": "AWS.SimpleQueueService.NonExistentQueue"}}


@pytest.fixture
def mock_session() -> MagicMock:
    session = MagicMock()
    mock_cm = MagicMock()
    mock_client = MagicMock()
    mock_client.get_queue_url = AsyncMock(return_value={"QueueUrl": ORDERS_URL})
    mock_client.create_queue = AsyncMock(
        return_value={"QueueUrl": "https://sqs.eu-west-1.amazonaws.com/123/created"}
    )
    mock_client.list_queues = AsyncMock(return_value={"QueueUrls": []})
    mock_client.send_message = AsyncMock(return_value={"MessageId": "m-1"})
    mock_cm.__aenter__ = AsyncMock(return_value=mock_client)
    mock_cm.__aexit__ = AsyncMock(return_value=None)
    session.create_client = MagicMock(return_value=mock_cm)
    return session


@pytest.fixture
def slow_session() -> MagicMock:
    """Session whose client creation yields to the event loop once."""
    session = MagicMock()
    opened: list[MagicMock] = []

    def create_client(*_args: Any, **_kwargs: Any) -> MagicMock:
        client = MagicMock()
        client.send_message = AsyncMock(return_value={"MessageId": "m"})
        cm = MagicMock()

        async def enter() -> MagicMock:
            await asyncio.sleep(0)
            opened.append(cm)
            return client

        cm.__aenter__ = AsyncMock(side_effect=enter)
        cm.__aexit__ = AsyncMock(return_value=None)
        return cm

    session.create_client = MagicMock(side_effect=create_client)
    session.opened = opened
    return session


@pytest.mark.asyncio
async def test_get_client_passes_region_and_client_kwargs(
    mock_session: MagicMock,
) -> None:
    conn = SQSConnectionManager(
        "eu-west-1", session=mock_session, endpoint_url="http://localhost:4566"
    )
    client1 = await conn.get_client()
    client2 = await conn.get_client()
    assert client1 is client2
    assert conn.region_name == "eu-west-1"
    mock_session.create_client.assert_called_once_with(
        "sqs", region_name="eu-west-1", endpoint_url="http://localhost:4566"
    )


@pytest.mark.asyncio
async def test_concurrent_first_calls_share_one_client(
    slow_session: MagicMock,
) -> None:
    conn = SQSConnectionManager(session=slow_session)
    channel = QueueMessageChannel(conn, ORDERS_URL)
    await asyncio.gather(
        channel.send(Message(payload="a")),
        channel.send(Message(payload="b")),
    )
    slow_session.create_client.assert_called_once()
    await conn.close()
    assert len(slow_session.opened) == 1
    slow_session.opened[0].__aexit__.assert_called_once()


@pytest.mark.asyncio
async def test_resolve_queue_url_passes_urls_through(mock_session: MagicMock) -> None:
    conn = SQSConnectionManager(session=mock_session)
    assert await conn.resolve_queue_url(ORDERS_URL) == ORDERS_URL
    mock_session.create_client.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_queue_url_looks_up_names(mock_session: MagicMock) -> None:
    conn = SQSConnectionManager(session=mock_session)
    assert await conn.resolve_queue_url("orders") == ORDERS_URL
    client = await conn.get_client()
    client.get_queue_url.assert_called_once_with(QueueName="orders")
    client.create_queue.assert_not_called()


@pytest.mark.asyncio
async def test_missing_queue_raises_unless_creation_enabled(
    mock_session: MagicMock,
) -> None:
    client = mock_session.create_client.return_value.__aenter__.return_value
    client.get_queue_url = AsyncMock(side_effect=NonExistentQueue())
    conn = SQSConnectionManager(session=mock_session)
    with pytest.raises(MessagingConnectionError, match="'created'") as exc_info:
        await conn.resolve_queue_url("created")
    assert isinstance(exc_info.value.__cause__, NonExistentQueue)
    client.create_queue.assert_not_called()


@pytest.mark.asyncio
async def test_missing_queue_is_created_when_enabled(mock_session: MagicMock) -> None:
    client = mock_session.create_client.return_value.__aenter__.return_value
    client.get_queue_url = AsyncMock(side_effect=NonExistentQueue())
    conn = SQSConnectionManager(session=mock_session, create_missing_queues=True)
    assert await conn.resolve_queue_url("created") == (
        "https://sqs.eu-west-1.amazonaws.com/123/created"
    )
    client.create_queue.assert_called_once_with(QueueName="created")


@pytest.mark.asyncio
async def test_create_queue_failure_is_wrapped(mock_session: MagicMock) -> None:
    client = mock_session.create_client.return_value.__aenter__.return_value
    client.get_queue_url = AsyncMock(side_effect=NonExistentQueue())
    client.create_queue = AsyncMock(side_effect=RuntimeError("quota"))
    conn = SQSConnectionManager(session=mock_session, create_missing_queues=True)
    with pytest.raises(MessagingConnectionError, match="quota"):
        await conn.resolve_queue_url("created")


@pytest.mark.asyncio
async def test_resolve_queue_url_wraps_other_errors(mock_session: MagicMock) -> None:
    client = mock_session.create_client.return_value.__aenter__.return_value
    client.get_queue_url = AsyncMock(side_effect=RuntimeError("access denied"))
    conn = SQSConnectionManager(session=mock_session, create_missing_queues=True)
    with pytest.raises(MessagingConnectionError, match="access denied") as exc_info:
        await conn.resolve_queue_url("orders")
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    client.create_queue.assert_not_called()


@pytest.mark.asyncio
async def test_channel_for_queue_resolves_name(mock_session: MagicMock) -> None:
    conn = SQSConnectionManager(session=mock_session)
    channel = await QueueMessageChannel.for_queue(conn, "orders")
    assert channel.queue_url == ORDERS_URL
    assert channel.connection is conn
    await channel.send(Message(payload="x"))
    client = await conn.get_client()
    assert client.send_message.call_args.kwargs["QueueUrl"] == ORDERS_URL


@pytest.mark.asyncio
async def test_async_context_manager_opens_and_closes(
    mock_session: MagicMock,
) -> None:
    mock_cm = mock_session.create_client.return_value
    async with SQSConnectionManager(session=mock_session) as conn:
        mock_session.create_client.assert_called_once()
        assert conn._client is not None
    mock_cm.__aexit__.assert_called_once()
    assert conn._client is None


@pytest.mark.asyncio
async def test_close_without_client_is_noop(mock_session: MagicMock) -> None:
    conn = SQSConnectionManager(session=mock_session)
    await conn.close()
    mock_session.create_client.return_value.__aexit__.assert_not_called()


@pytest.mark.asyncio
async def test_health_check(mock_session: MagicMock) -> None:
    conn = SQSConnectionManager(session=mock_session)
    assert await conn.health_check() is True
    client = await conn.get_client()
    client.list_queues.assert_called_once_with(MaxResults=1)
    client.list_queues = AsyncMock(side_effect=RuntimeError("timeout"))
    assert await conn.health_check() is False
