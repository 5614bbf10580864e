"""
Pushover error types.

Network faults are not wrapped: ``TransportError`` is httpx's own exception
and reaches the caller unmodified. API rejections are returned as data
(see ``pushover_push.response.PushResult``), never raised.
"""

from typing import Any, Optional

from httpx import TransportError


class PushoverError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class InputValidationError(PushoverError):
    """A field value or a combination of fields is not acceptable."""

    def __init__(self, message: str, fields: Optional[list[str]] = None):
        super().__init__("input_validation", message, {"fields": fields or []})
        self.fields = fields or []


class AttachmentReadError(PushoverError):
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__("attachment_read", message, {"path": path})
        self.path = path


__all__ = ["PushoverError", "InputValidationError", "AttachmentReadError", "TransportError"]
