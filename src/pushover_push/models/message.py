"""
Pushover message model, see https://pushover.net/api

Field declaration order is the wire order used by the encoder.
"""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_core import PydanticCustomError

logger = logging.getLogger(__name__)

Priority = Literal[-2, -1, 0, 1, 2]
EMERGENCY_PRIORITY = 2


def _combination_error(message: str, fields: list[str]) -> PydanticCustomError:
    return PydanticCustomError("field_combination", "{detail}", {"detail": message, "fields": fields})


class Message(BaseModel):
    """One notification, validated on construction and immutable afterwards."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    token: str
    user: str
    message: str
    attachment: Optional[bytes] = None
    attachment_base64: Optional[str] = None
    attachment_type: Optional[str] = None
    device: Optional[str] = None
    html: Optional[Literal[1]] = None
    priority: Optional[Priority] = None
    retry: Optional[int] = None
    expire: Optional[int] = None
    callback: Optional[str] = None
    sound: Optional[str] = None
    timestamp: Optional[int] = None
    title: Optional[str] = None
    ttl: Optional[int] = None
    url: Optional[str] = None
    url_title: Optional[str] = None

    @model_validator(mode="after")
    def _check_combinations(self) -> "Message":
        has_retry = self.retry is not None
        has_expire = self.expire is not None

        if self.priority == EMERGENCY_PRIORITY and not (has_retry and has_expire):
            raise _combination_error(
                "priority 2 requires both retry and expire", ["priority", "retry", "expire"]
            )
        if has_retry != has_expire:
            raise _combination_error("retry and expire must be set together", ["retry", "expire"])
        if has_retry and self.priority != EMERGENCY_PRIORITY:
            raise _combination_error(
                "retry and expire are only accepted with priority 2", ["retry", "expire", "priority"]
            )
        if self.url_title is not None and self.url is None:
            raise _combination_error("url_title requires url", ["url_title", "url"])
        if self.attachment is not None and self.attachment_base64 is not None:
            raise _combination_error(
                "attachment and attachment_base64 are mutually exclusive",
                ["attachment", "attachment_base64"],
            )

        if self.callback is not None and self.priority != EMERGENCY_PRIORITY:
            logger.warning("callback is ignored unless priority is 2")
        if self.attachment_type is not None and self.attachment is None and self.attachment_base64 is None:
            logger.warning("attachment_type is ignored without an attachment")
        return self
