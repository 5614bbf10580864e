"""
HTTP transport for the Pushover Message API.

Exactly one POST per call. The response is handed back untouched; status
interpretation belongs to ``pushover_push.response``.
"""

import logging
from typing import Optional

import httpx

from pushover_push import __version__
from pushover_push.models.message import Message
from pushover_push.transport.encoding import encode_message, to_multipart

logger = logging.getLogger(__name__)

API_URL = "https://api.pushover.net/1/messages.json"
DEFAULT_TIMEOUT = 30.0


class HttpClient:
    def __init__(
        self,
        url: str = API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._url = url
        self._client = httpx.AsyncClient(
            headers={"User-Agent": f"pushover-push/{__version__}"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def url(self) -> str:
        return self._url

    async def post_message(self, message: Message) -> httpx.Response:
        """Encode ``message`` as multipart form data and POST it once."""
        files = to_multipart(encode_message(message), message.attachment_type)
        logger.debug("POST %s with parts %s", self._url, [name for name, _ in files])
        resp = await self._client.post(self._url, files=files)
        logger.debug("Pushover answered HTTP %s", resp.status_code)
        return resp

    async def close(self) -> None:
        await self._client.aclose()
