"""Pollable message channel over Amazon SQS."""

from __future__ import annotations

from .attributes import HeaderKind, MessageAttributeDataTypes, get_message_attributes
from .conversion import create_message
from .message import CONTENT_TYPE, Message, MimeType
from .number_types import NumberType
from .ports import IMessageChannel, IPollableChannel
from .primitives.exceptions import (
    InfrastructureError,
    MessageConversionError,
    MessageDeliveryError,
    MessagingConnectionError,
    MessagingError,
    SQSChannelError,
    UnsupportedNumberTypeError,
)

__all__ = [
    "CONTENT_TYPE",
    "HeaderKind",
    "IMessageChannel",
    "IPollableChannel",
    "InfrastructureError",
    "Message",
    "MessageAttributeDataTypes",
    "MessageConversionError",
    "MessageDeliveryError",
    "MessagingConnectionError",
    "MessagingError",
    "MimeType",
    "NumberType",
    "SQSChannelError",
    "UnsupportedNumberTypeError",
    "create_message",
    "get_message_attributes",
]
