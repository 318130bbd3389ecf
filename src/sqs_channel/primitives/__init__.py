"""Framework primitives: exceptions shared by every layer."""

from __future__ import annotations

from .exceptions import (
    InfrastructureError,
    MessageConversionError,
    MessageDeliveryError,
    MessagingConnectionError,
    MessagingError,
    SQSChannelError,
    UnsupportedNumberTypeError,
)

__all__ = [
    "InfrastructureError",
    "MessageConversionError",
    "MessageDeliveryError",
    "MessagingConnectionError",
    "MessagingError",
    "SQSChannelError",
    "UnsupportedNumberTypeError",
]
