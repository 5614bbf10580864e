"""
Response interpretation. Decides success/failure of a push and renders
API-side errors for humans.
"""

import json
import logging
from typing import TYPE_CHECKING, Any, Optional

import httpx

from pushover_push.models.result import PushResult

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to send message."


def _error_text(descriptor: Any) -> str:
    if isinstance(descriptor, str):
        return descriptor
    if isinstance(descriptor, dict) and descriptor.get("message") is not None:
        return str(descriptor["message"])
    return str(descriptor)


def _parse_body(resp: httpx.Response) -> Optional[dict[str, Any]]:
    try:
        body = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return body if isinstance(body, dict) else None


def interpret_response(resp: httpx.Response) -> PushResult:
    """Map a raw Pushover response to a PushResult. Never raises on status."""
    body = _parse_body(resp)
    request_id = body.get("request") if body else None
    if not isinstance(request_id, str):
        request_id = None

    if resp.status_code == 200:
        return PushResult(ok=True, status=200, request=request_id)

    errors = body.get("errors") if body else None
    if isinstance(errors, list) and errors:
        messages = [_error_text(e) for e in errors]
    else:
        messages = [GENERIC_FAILURE]
    logger.info("Pushover rejected the message: HTTP %s, %d error(s)", resp.status_code, len(messages))
    return PushResult(ok=False, status=resp.status_code, request=request_id, errors=messages)


def report(result: PushResult, console: "Console") -> None:
    """Print one line per API error; print nothing on success."""
    for message in result.errors:
        console.print(f"Error: {message}", markup=False, highlight=False)
