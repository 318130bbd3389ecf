"""Exceptions raised by sqs-message-channel."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..message import Message


class SQSChannelError(Exception):
    """Root exception for the entire sqs-message-channel package."""


class InfrastructureError(SQSChannelError):
    """Base class for all infrastructure-related errors."""


class MessagingError(InfrastructureError):
    """Base class for all messaging-related infrastructure errors."""


class MessagingConnectionError(MessagingError):
    """Raised when connectivity to the queue service fails."""


class MessageDeliveryError(MessagingError):
    """Raised when the queue service rejects an outbound message.

    Carries the message that could not be delivered; the service error is
    available as ``__cause__``.
    """

    def __init__(self, failed_message: Message, reason: str | None = None) -> None:
        self.failed_message = failed_message
        super().__init__(reason or "Failed to send message to queue")


class MessageConversionError(MessagingError):
    """Raised when a raw queue message cannot be converted into a Message."""


class UnsupportedNumberTypeError(MessagingError, ValueError):
    """Raised when a numeric header is not one of the standard number types.

    Usage: header mapping raises this before any network call is made, so the
    whole send is aborted.
    """

    def __init__(self, value: Any, header_name: str | None = None) -> None:
        self.value = value
        self.header_name = header_name
        where = f" (header {header_name!r})" if header_name else ""
        super().__init__(
            "Only standard number types are accepted as message header, "
            f"got {type(value).__name__}{where}"
        )
