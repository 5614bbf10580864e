import re

import httpx
import pytest

from pushover_push.client import AsyncPushover


def form_parts(request: httpx.Request) -> list[tuple[str, bytes]]:
    """Split a multipart request body into (name, content) pairs."""
    boundary = request.headers["content-type"].split("boundary=")[1].encode()
    parts = []
    for chunk in request.content.split(b"--" + boundary):
        if chunk in (b"", b"--\r\n", b"--"):
            continue
        head, _, content = chunk.partition(b"\r\n\r\n")
        name = re.search(rb'name="([^"]+)"', head).group(1).decode()
        parts.append((name, content[:-2] if content.endswith(b"\r\n") else content))
    return parts


def part_headers(request: httpx.Request, name: str) -> bytes:
    boundary = request.headers["content-type"].split("boundary=")[1].encode()
    for chunk in request.content.split(b"--" + boundary):
        head, _, _ = chunk.partition(b"\r\n\r\n")
        if f'name="{name}"'.encode() in head:
            return head
    raise KeyError(name)


class Recorder:
    def __init__(self, status: int = 200, body=None, content: bytes = None):
        self.status = status
        self.body = {"status": 1, "request": "req-1"} if body is None else body
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        return httpx.Response(self.status, json=self.body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(recorder):
    def _make(rec: Recorder = None) -> AsyncPushover:
        return AsyncPushover(transport=(rec or recorder).transport())
    return _make
