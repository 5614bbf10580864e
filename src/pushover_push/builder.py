"""
Message builder. Turns loose input (CLI flags, env, config, kwargs) into a
validated Message, or fails before anything touches the network.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from pushover_push.errors import AttachmentReadError, InputValidationError
from pushover_push.models.message import Message

logger = logging.getLogger(__name__)


def read_attachment(path: Union[str, Path]) -> bytes:
    """Read an attachment file in full. The handle is closed on every path."""
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as e:
        reason = e.strerror or str(e)
        raise AttachmentReadError(f"Failed to read attachment file ({reason}).", path=str(path)) from e
    logger.debug("Read %d attachment bytes from %s", len(data), path)
    return data


def _describe(exc: ValidationError) -> tuple[str, list[str]]:
    fields: list[str] = []
    lines: list[str] = []
    for err in exc.errors():
        ctx = err.get("ctx") or {}
        names = list(ctx.get("fields") or [str(part) for part in err["loc"]])
        for name in names:
            if name not in fields:
                fields.append(name)
        where = ", ".join(names) if names else "message"
        lines.append(f"{where}: {err['msg']}")
    return "; ".join(lines), fields


def build_message(*, attachment_path: Optional[Union[str, Path]] = None, **fields: Any) -> Message:
    """Validate ``fields`` into a Message.

    ``None`` values count as absent. ``html`` may be given as a boolean flag.
    When ``attachment_path`` is set, the file's bytes become ``attachment``.
    """
    values = {k: v for k, v in fields.items() if v is not None}

    html = values.pop("html", None)
    if html is True or html == 1:
        values["html"] = 1
    elif html not in (None, False, 0):
        raise InputValidationError(f"html: expected a flag, got {html!r}", ["html"])

    if attachment_path is not None:
        if "attachment" in values:
            raise InputValidationError(
                "attachment: give either a file path or attachment bytes, not both", ["attachment"]
            )
        values["attachment"] = read_attachment(attachment_path)

    try:
        return Message(**values)
    except ValidationError as e:
        detail, names = _describe(e)
        raise InputValidationError(f"Invalid message ({detail})", names) from e


def coerce_message(message: Union[Message, Mapping[str, Any]]) -> Message:
    """Accept a Message or any Message-shaped mapping."""
    if isinstance(message, Message):
        return message
    return build_message(**dict(message))
