"""Streaming response decoder.

A stream handle drains every chunk the API sends into one buffer, drops the
``[DONE]`` sentinel and parses what is left as a single response document.
``next()`` is a one-shot coroutine: the first call drains the stream to the
end and later calls return ``None`` because nothing is left to read.
"""
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Generic, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from ryst_openai.errors import InternalError, InvalidStateError

STREAM_TERMINATION = b"[DONE]"

ResponseT = TypeVar("ResponseT", bound=BaseModel)

log = structlog.get_logger(__name__)


class ResponseStream(Generic[ResponseT]):
    """Handle over an open byte stream that decodes to at most one ``ResponseT``."""

    response_model: type[ResponseT]

    def __init__(
        self,
        chunks: AsyncIterator[bytes],
        close: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self._chunks = chunks
        self._close = close
        self._drained = False

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        owned_client: httpx.AsyncClient | None = None,
    ) -> "ResponseStream[ResponseT]":
        """Wrap an open streaming response; ``owned_client`` is closed with it."""

        async def close() -> None:
            try:
                await response.aclose()
            finally:
                if owned_client is not None:
                    await owned_client.aclose()

        return cls(response.aiter_bytes(), close=close)

    @property
    def drained(self) -> bool:
        return self._drained

    async def next(self) -> ResponseT | None:
        """Drain the stream and return the decoded response.

        Returns ``None`` when the stream carried no content (or only the
        sentinel), and on every call after the first.
        """
        if self._drained:
            return None
        buffer = bytearray()
        try:
            async for chunk in self._chunks:
                if chunk != STREAM_TERMINATION:
                    buffer.extend(chunk)
        except httpx.RequestError as e:
            log.warning("openai_stream_aborted", error=str(e), buffered=len(buffer))
            raise InternalError.from_source(e) from e
        finally:
            self._drained = True
            await self.aclose()

        log.debug("openai_stream_drained", size=len(buffer))
        if not buffer:
            return None
        try:
            return self.response_model.model_validate_json(bytes(buffer))
        except ValidationError as e:
            raise InvalidStateError(str(e)) from e

    async def aclose(self) -> None:
        """Release the underlying connection without draining."""
        self._drained = True
        close, self._close = self._close, None
        if close is not None:
            await close()

    async def __aenter__(self) -> "ResponseStream[ResponseT]":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
