"""
Pushover and AsyncPushover, the main library clients.
"""

import asyncio
from typing import Any, Mapping, Optional, Union

import httpx

from pushover_push.builder import coerce_message
from pushover_push.models.message import Message
from pushover_push.transport.http import API_URL, DEFAULT_TIMEOUT, HttpClient

MessageLike = Union[Message, Mapping[str, Any]]


class AsyncPushover:
    """Async Pushover client (primary)."""

    def __init__(
        self,
        url: str = API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.http = HttpClient(url=url, timeout=timeout, transport=transport)

    async def push(self, message: MessageLike) -> httpx.Response:
        """Send one message and return the raw HTTP response.

        Mappings are validated first, so a bad field raises
        ``InputValidationError`` before any request is made.
        """
        return await self.http.post_message(coerce_message(message))

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncPushover":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class Pushover:
    """Sync wrapper around AsyncPushover. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncPushover(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    def push(self, message: MessageLike) -> httpx.Response:
        return self._run(self._async.push(message))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "Pushover":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


async def push_async(message: MessageLike, **client_kwargs: Any) -> httpx.Response:
    """One-shot async push with a throwaway client."""
    async with AsyncPushover(**client_kwargs) as client:
        return await client.push(message)


def push(message: MessageLike, **client_kwargs: Any) -> httpx.Response:
    """One-shot blocking push.

    Example::

        push({"token": "YOUR_TOKEN", "user": "YOUR_USER", "message": "Hello, world!"})
    """
    with Pushover(**client_kwargs) as client:
        return client.push(message)
