"""SQS transport adapter built on aiobotocore."""

from __future__ import annotations

from .channel import QueueMessageChannel
from .connection import SQSConnectionManager

__all__ = [
    "QueueMessageChannel",
    "SQSConnectionManager",
]
