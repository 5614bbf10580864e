"""
Outcome of a push, as seen by the caller.
"""

from typing import Optional
from pydantic import BaseModel


class PushResult(BaseModel):
    ok: bool
    status: int
    request: Optional[str] = None    # Pushover request id, when the body carries one
    errors: list[str] = []
