"""
Multipart form encoding for a Message.

One part per present field, in the fixed order below. Absent fields produce
no part at all.
"""

from typing import Callable, Optional, Union

from pushover_push.models.message import Message

Part = tuple[str, Union[str, bytes]]


def _text(value: str) -> str:
    return value


def _number(value: int) -> str:
    return str(int(value))


def _binary(value: bytes) -> bytes:
    return bytes(value)


FIELD_ENCODERS: tuple[tuple[str, Callable], ...] = (
    ("token", _text),
    ("user", _text),
    ("message", _text),
    ("attachment", _binary),
    ("attachment_base64", _text),
    ("attachment_type", _text),
    ("device", _text),
    ("html", _number),
    ("priority", _number),
    ("retry", _number),
    ("expire", _number),
    ("callback", _text),
    ("sound", _text),
    ("timestamp", _number),
    ("title", _text),
    ("ttl", _number),
    ("url", _text),
    ("url_title", _text),
)


def encode_message(message: Message) -> list[Part]:
    """Render every present field of ``message`` as a (name, value) form part."""
    parts: list[Part] = []
    for name, encode in FIELD_ENCODERS:
        value = getattr(message, name)
        if value is None:
            continue
        parts.append((name, encode(value)))
    return parts


def to_multipart(parts: list[Part], attachment_type: Optional[str] = None) -> list[tuple[str, tuple]]:
    """Shape encoded parts as an ordered httpx ``files`` list.

    Text parts carry no filename so they render as plain form fields; binary
    parts become a file upload typed by ``attachment_type``.
    """
    files: list[tuple[str, tuple]] = []
    for name, value in parts:
        if isinstance(value, bytes):
            files.append((name, (name, value, attachment_type or "application/octet-stream")))
        else:
            files.append((name, (None, value.encode("utf-8"))))
    return files
