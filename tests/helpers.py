"""Test doubles for the OpenAI HTTP API."""
import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx


class ChunkStream(httpx.AsyncByteStream):
    """Response body delivered chunk by chunk, optionally failing after the last one."""

    def __init__(self, chunks: list[bytes], error: Exception | None = None) -> None:
        self._chunks = chunks
        self._error = error

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error


class FakeOpenAI:
    """Records every request and answers with ``responder``."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def reply(self, status_code: int, **kwargs: Any) -> None:
        self.responder = lambda request: httpx.Response(status_code, **kwargs)

    def reply_chunks(self, chunks: list[bytes], error: Exception | None = None) -> None:
        self.responder = lambda request: httpx.Response(200, stream=ChunkStream(chunks, error))

    def fail(self, error: Exception) -> None:
        def raise_error(request: httpx.Request) -> httpx.Response:
            raise error

        self.responder = raise_error

    def body(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


async def iter_chunks(chunks: list[bytes], error: Exception | None = None) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk
    if error is not None:
        raise error
