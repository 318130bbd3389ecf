"""Convert raw SQS messages (boto response dicts) into Message instances."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .attributes import MessageAttributeDataTypes
from .message import CONTENT_TYPE, MESSAGE_ID, RECEIPT_HANDLE, Message, MimeType
from .number_types import NumberType
from .primitives.exceptions import MessageConversionError

logger = logging.getLogger(__name__)


def _matches(data_type: str, base: str) -> bool:
    # SQS allows custom type labels, e.g. "String.json" or "Number.Integer".
    return data_type == base or data_type.startswith(f"{base}.")


def _number_value(data_type: str, text: str) -> int | float | Decimal:
    suffix = data_type[len(MessageAttributeDataTypes.NUMBER) + 1 :]
    try:
        if not suffix:
            number = Decimal(text)
            return int(number) if number == number.to_integral_value() else number
        return NumberType.from_suffix(suffix).parse(text)
    except (ArithmeticError, ValueError) as e:
        raise MessageConversionError(
            f"Message attribute with value '{text}' and data type '{data_type}' "
            "could not be converted into a Number"
        ) from e


def _attribute_value(name: str, attribute: Mapping[str, Any]) -> Any:
    data_type = str(attribute.get("DataType", ""))
    if name == CONTENT_TYPE:
        try:
            return MimeType.parse(attribute.get("StringValue", ""))
        except ValueError as e:
            raise MessageConversionError(str(e)) from e
    if _matches(data_type, MessageAttributeDataTypes.STRING):
        return attribute.get("StringValue")
    if _matches(data_type, MessageAttributeDataTypes.NUMBER):
        return _number_value(data_type, str(attribute.get("StringValue")))
    if _matches(data_type, MessageAttributeDataTypes.BINARY):
        return attribute.get("BinaryValue")
    logger.warning(
        "Skipping message attribute '%s' with unsupported data type '%s'",
        name,
        data_type,
    )
    return None


def get_message_attributes_as_headers(
    message_attributes: Mapping[str, Mapping[str, Any]],
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    for name, attribute in message_attributes.items():
        value = _attribute_value(name, attribute)
        if value is not None:
            headers[name] = value
    return headers


def create_message(
    raw: Mapping[str, Any],
    additional_headers: Mapping[str, Any] | None = None,
) -> Message:
    """Build a Message from a message returned by ``receive_message``.

    The body becomes the payload. Headers are, in increasing precedence:
    message id and receipt handle, *additional_headers*, SQS metadata
    attributes, then the decoded message attributes.

    Raises:
        MessageConversionError: an attribute value cannot be decoded.
    """
    headers: dict[str, Any] = {
        MESSAGE_ID: raw.get("MessageId"),
        RECEIPT_HANDLE: raw.get("ReceiptHandle"),
    }
    headers.update(additional_headers or {})
    headers.update({k: str(v) for k, v in (raw.get("Attributes") or {}).items()})
    headers.update(get_message_attributes_as_headers(raw.get("MessageAttributes") or {}))
    try:
        return Message(payload=raw.get("Body", ""), headers=headers)
    except ValueError as e:
        raise MessageConversionError(str(e)) from e
