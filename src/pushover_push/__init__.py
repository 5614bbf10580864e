"""
pushover-push: send Pushover notifications from Python or the command line.

Multipart REST client for the Pushover Message API (https://pushover.net/api).
"""

__version__ = "0.1.0"

from pushover_push.models.message import Message
from pushover_push.models.result import PushResult
from pushover_push.builder import build_message, read_attachment
from pushover_push.client import Pushover, AsyncPushover, push, push_async
from pushover_push.response import interpret_response, report
from pushover_push.errors import PushoverError, InputValidationError, AttachmentReadError, TransportError
from pushover_push.transport.http import API_URL

__all__ = [
    "Message",
    "PushResult",
    "build_message",
    "read_attachment",
    "Pushover",
    "AsyncPushover",
    "push",
    "push_async",
    "interpret_response",
    "report",
    "PushoverError",
    "InputValidationError",
    "AttachmentReadError",
    "TransportError",
    "API_URL",
]
