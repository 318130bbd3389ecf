"""QueueMessageChannel — pollable message channel backed by one SQS queue."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from botocore.exceptions import ClientError

from ..attributes import get_message_attributes
from ..conversion import create_message
from ..ports.channel import IPollableChannel
from ..primitives.exceptions import MessageDeliveryError

if TYPE_CHECKING:
    from ..message import Message
    from .connection import SQSConnectionManager

logger = logging.getLogger(__name__)

ATTRIBUTE_NAMES = ["All"]
MESSAGE_ATTRIBUTE_NAMES = ["All"]


def get_delay_seconds(timeout: float) -> int:
    """Negative timeouts mean no delay."""
    return max(int(timeout), 0)


class QueueMessageChannel(IPollableChannel):
    """SQS adapter implementing IPollableChannel.

    ``send`` maps headers to message attributes and uses the timeout as the
    delivery delay. ``receive`` polls for a single message and deletes it
    from the queue before returning it. The caller owns the message from
    then on: if it fails while processing, SQS will not redeliver.
    """

    def __init__(self, connection: SQSConnectionManager, queue_url: str) -> None:
        """Bind the channel to a queue.

        Args:
            connection: Shared connection manager providing the SQS client.
            queue_url: URL of the target queue.
        """
        self._connection = connection
        self._queue_url = queue_url

    @classmethod
    async def for_queue(
        cls, connection: SQSConnectionManager, queue: str
    ) -> QueueMessageChannel:
        """Build a channel for a queue given by name or URL.

        Raises:
            MessagingConnectionError: the queue name cannot be resolved.
        """
        return cls(connection, await connection.resolve_queue_url(queue))

    @property
    def connection(self) -> SQSConnectionManager:
        return self._connection

    @property
    def queue_url(self) -> str:
        return self._queue_url

    async def send(self, message: Message, timeout: int = 0) -> bool:
        """Send *message* with *timeout* seconds of delivery delay.

        Raises:
            UnsupportedNumberTypeError: a numeric header is not a standard
                number; nothing is sent.
            MessageDeliveryError: SQS rejected the request.
        """
        send_kwargs: dict[str, Any] = {
            "QueueUrl": self._queue_url,
            "MessageBody": str(message.payload),
            "DelaySeconds": get_delay_seconds(timeout),
        }
        attributes = get_message_attributes(message.headers)
        if attributes:
            send_kwargs["MessageAttributes"] = attributes
        client = await self._connection.get_client()
        try:
            await client.send_message(**send_kwargs)
        except ClientError as e:
            raise MessageDeliveryError(message, str(e)) from e
        logger.debug(
            "Sent message to %s (delay=%ss, attributes=%s)",
            self._queue_url,
            send_kwargs["DelaySeconds"],
            sorted(attributes),
        )
        return True

    async def receive(self, timeout: int = 0) -> Message | None:
        """Receive at most one message, long-polling for *timeout* seconds.

        The message is deleted from the queue before it is returned. A
        failing delete propagates to the caller as-is.
        """
        client = await self._connection.get_client()
        out = await client.receive_message(
            QueueUrl=self._queue_url,
            MaxNumberOfMessages=1,
            WaitTimeSeconds=int(timeout),
            AttributeNames=ATTRIBUTE_NAMES,
            MessageAttributeNames=MESSAGE_ATTRIBUTE_NAMES,
        )
        messages = out.get("Messages") or []
        if not messages:
            return None
        raw = messages[0]
        message = create_message(raw)
        await client.delete_message(
            QueueUrl=self._queue_url,
            ReceiptHandle=raw["ReceiptHandle"],
        )
        logger.debug("Received and deleted message %s", raw.get("MessageId"))
        return message

    async def health_check(self) -> bool:
        """Return True if SQS is reachable."""
        return await self._connection.health_check()
