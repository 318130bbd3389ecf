"""Header to SQS message attribute mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .message import CONTENT_TYPE, MimeType
from .number_types import NumberType, is_number

logger = logging.getLogger(__name__)


class MessageAttributeDataTypes:
    """SQS message attribute data type tags."""

    STRING = "String"
    NUMBER = "Number"
    BINARY = "Binary"


class HeaderKind(Enum):
    CONTENT_TYPE = "content_type"
    STRING = "string"
    NUMBER = "number"
    BINARY = "binary"
    UNSUPPORTED = "unsupported"


_BINARY_TYPES = (bytes, bytearray, memoryview)


def classify_header(name: str, value: Any) -> HeaderKind:
    """Resolve which attribute variant a header maps to.

    The content-type key wins over the value's own kind as long as the value
    is not None.
    """
    if name == CONTENT_TYPE and value is not None:
        return HeaderKind.CONTENT_TYPE
    if isinstance(value, str):
        return HeaderKind.STRING
    if is_number(value):
        return HeaderKind.NUMBER
    if isinstance(value, _BINARY_TYPES):
        return HeaderKind.BINARY
    return HeaderKind.UNSUPPORTED


def string_attribute(value: str) -> dict[str, Any]:
    return {"DataType": MessageAttributeDataTypes.STRING, "StringValue": value}


def number_attribute(value: Any, name: str | None = None) -> dict[str, Any]:
    """Build a ``Number.<subtype>`` attribute; non-standard numbers raise."""
    number_type = NumberType.of(value, name)
    return {
        "DataType": f"{MessageAttributeDataTypes.NUMBER}.{number_type.value}",
        "StringValue": str(value),
    }


def binary_attribute(value: bytes | bytearray | memoryview) -> dict[str, Any]:
    return {"DataType": MessageAttributeDataTypes.BINARY, "BinaryValue": bytes(value)}


def content_type_attribute(value: Any) -> dict[str, Any] | None:
    # Neither MimeType nor str: no attribute, and nothing is logged.
    if isinstance(value, MimeType):
        return string_attribute(str(value))
    if isinstance(value, str):
        return string_attribute(value)
    return None


def to_message_attribute(name: str, value: Any) -> dict[str, Any] | None:
    """Map one header to its SQS attribute, or None if it cannot be sent."""
    kind = classify_header(name, value)
    if kind is HeaderKind.CONTENT_TYPE:
        return content_type_attribute(value)
    if kind is HeaderKind.STRING:
        return string_attribute(value)
    if kind is HeaderKind.NUMBER:
        return number_attribute(value, name)
    if kind is HeaderKind.BINARY:
        return binary_attribute(value)
    logger.warning(
        "Message header with name '%s' and type '%s' cannot be sent as "
        "message attribute because it is not supported by SQS.",
        name,
        type(value).__qualname__ if value is not None else "",
    )
    return None


def get_message_attributes(headers: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """Build the ``MessageAttributes`` mapping for ``send_message``.

    Raises:
        UnsupportedNumberTypeError: a numeric header is not a standard number.
    """
    attributes: dict[str, dict[str, Any]] = {}
    for name, value in headers.items():
        attribute = to_message_attribute(name, value)
        if attribute is not None:
            attributes[name] = attribute
    return attributes
