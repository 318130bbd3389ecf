from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..message import Message


@runtime_checkable
class IMessageChannel(Protocol):
    """
    Port for sending messages to a destination (SQS queue, in-memory, …).

    Infrastructure packages provide concrete adapters.
    """

    async def send(self, message: Message, timeout: int = 0) -> bool:
        """
        Send *message* to the channel.

        Args:
            message: The message to send.
            timeout: Transport-specific hint; SQS treats it as the delivery
                delay in seconds.

        Returns:
            True once the transport accepted the message.
        """
        ...


@runtime_checkable
class IPollableChannel(IMessageChannel, Protocol):
    """
    Port for channels that can also be polled for messages.
    """

    async def receive(self, timeout: int = 0) -> Message | None:
        """
        Receive one message, waiting up to *timeout* seconds.

        Returns:
            The next message, or None if none arrived in time.
        """
        ...
