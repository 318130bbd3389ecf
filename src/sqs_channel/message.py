"""Message — immutable payload plus headers, and the MimeType header value."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .number_types import NumberType, is_number

CONTENT_TYPE = "contentType"

# Headers populated from the raw queue message on receive.
MESSAGE_ID = "MessageId"
RECEIPT_HANDLE = "ReceiptHandle"

_TOKEN_SEPARATORS = set('()<>@,;:\\"/[]?={} \t')


def _check_token(token: str, what: str, source: str) -> str:
    if not token or any(ch in _TOKEN_SEPARATORS for ch in token):
        raise ValueError(f"Invalid {what} in mime type {source!r}")
    return token


class MimeType(BaseModel):
    """Structured content-type value, e.g. ``text/plain;charset=UTF-8``.

    ``str()`` yields the canonical form used on the wire.
    """

    model_config = ConfigDict(frozen=True)

    type: str = "*"
    subtype: str = "*"
    parameters: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> MimeType:
        """Parse ``type/subtype;name=value`` into a MimeType."""
        if not text or not text.strip():
            raise ValueError("Mime type must not be empty")
        full, *params = [part.strip() for part in text.split(";")]
        if full == "*":
            full = "*/*"
        main, sep, sub = full.partition("/")
        if not sep:
            raise ValueError(f"Mime type {text!r} does not contain '/'")
        _check_token(main, "type", text)
        _check_token(sub, "subtype", text)
        parameters: dict[str, str] = {}
        for param in params:
            if not param:
                continue
            name, eq, value = param.partition("=")
            if not eq:
                raise ValueError(f"Invalid parameter {param!r} in mime type {text!r}")
            parameters[_check_token(name.strip(), "parameter", text)] = value.strip()
        return cls(type=main.lower(), subtype=sub.lower(), parameters=parameters)

    def __str__(self) -> str:
        params = "".join(f";{k}={v}" for k, v in self.parameters.items())
        return f"{self.type}/{self.subtype}{params}"


class Message(BaseModel):
    """Immutable in-process message.

    ``payload`` may be anything; it is stringified when sent. ``headers``
    values are typically ``str``, standard numbers, bytes or a MimeType.
    Numeric headers are checked against NumberType when the message is built;
    ``headers`` is a read-only view afterwards.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    payload: Any
    headers: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("headers")
    @classmethod
    def _standard_numbers_only(cls, headers: Mapping[str, Any]) -> Mapping[str, Any]:
        for name, value in headers.items():
            if is_number(value):
                NumberType.of(value, name)
        return MappingProxyType(dict(headers))

    @property
    def content_type(self) -> MimeType | str | None:
        return self.headers.get(CONTENT_TYPE)

    def with_headers(self, **headers: Any) -> Message:
        """Return a copy with *headers* merged over the existing ones."""
        return Message(payload=self.payload, headers={**self.headers, **headers})
