"""SQSConnectionManager — one shared aiobotocore client per region."""

from __future__ import annotations

import asyncio
from typing import Any

from aiobotocore.session import AioSession

from ..primitives.exceptions import MessagingConnectionError

_NON_EXISTENT_QUEUE = "AWS.SimpleQueueService.NonExistentQueue"


class SQSConnectionManager:
    """Owns the SQS client shared by every channel bound to it.

    The client is created on first use; concurrent first callers share the
    same instance. Usable as an async context manager.
    """

    def __init__(
        self,
        region_name: str = "us-east-1",
        *,
        session: AioSession | None = None,
        create_missing_queues: bool = False,
        **client_kwargs: Any,
    ) -> None:
        """Configure the connection.

        Args:
            region_name: AWS region of the queues.
            session: aiobotocore session; a fresh AioSession by default.
            create_missing_queues: Create a queue when resolving a name that
                does not exist yet.
            **client_kwargs: Passed to ``create_client`` (``endpoint_url``,
                credentials, ``config``, …).
        """
        self._region = region_name
        self._session = session or AioSession()
        self._create_missing = create_missing_queues
        self._client_kwargs = client_kwargs
        self._client: Any = None
        self._client_cm: Any = None
        self._lock = asyncio.Lock()

    @property
    def region_name(self) -> str:
        return self._region

    async def get_client(self) -> Any:
        """Return the shared SQS client, creating it once."""
        if self._client is not None:
            return self._client
        async with self._lock:
            if self._client is None:
                client_cm = self._session.create_client(
                    "sqs",
                    region_name=self._region,
                    **self._client_kwargs,
                )
                self._client = await client_cm.__aenter__()
                self._client_cm = client_cm
        return self._client

    async def resolve_queue_url(self, queue: str) -> str:
        """Return *queue* unchanged if it is already a URL, else look it up.

        Raises:
            MessagingConnectionError: the queue cannot be resolved.
        """
        if queue.startswith(("https://", "http://")):
            return queue
        client = await self.get_client()
        try:
            out = await client.get_queue_url(QueueName=queue)
        except Exception as e:
            code = (getattr(e, "response", None) or {}).get("Error", {}).get("Code")
            if code != _NON_EXISTENT_QUEUE or not self._create_missing:
                raise MessagingConnectionError(
                    f"Cannot resolve queue {queue!r}: {e}"
                ) from e
            try:
                out = await client.create_queue(QueueName=queue)
            except Exception as create_error:
                raise MessagingConnectionError(
                    f"Cannot create queue {queue!r}: {create_error}"
                ) from create_error
        return str(out["QueueUrl"])

    async def close(self) -> None:
        """Close the client if open."""
        async with self._lock:
            if self._client_cm is not None:
                await self._client_cm.__aexit__(None, None, None)
                self._client_cm = None
                self._client = None

    async def health_check(self) -> bool:
        """Return True if we can list queues."""
        try:
            client = await self.get_client()
            await client.list_queues(MaxResults=1)
            return True
        except Exception:  # noqa: BLE001
            return False

    async def __aenter__(self) -> SQSConnectionManager:
        await self.get_client()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
