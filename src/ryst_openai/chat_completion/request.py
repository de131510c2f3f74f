"""Builder for chat completion requests."""
from typing import ClassVar

import httpx

from ryst_openai.base import BaseRequest
from ryst_openai.config import OpenAISettings
from ryst_openai.chat_completion.response import (
    ChatCompletionResponse,
    ChatCompletionResponseStream,
    Message,
)


class ChatCompletionRequest(BaseRequest):
    """Chat completion request builder.

    ``model`` and the ordered ``messages`` are required:

        response = await ChatCompletionRequest(
            model="gpt-3.5-turbo",
            messages=[Message(role="user", content="Say this is a test.")],
        ).submit()
    """

    endpoint: ClassVar[str] = "/v1/chat/completions"
    response_model: ClassVar[type[ChatCompletionResponse]] = ChatCompletionResponse
    stream_class: ClassVar[type[ChatCompletionResponseStream]] = ChatCompletionResponseStream

    messages: list[Message]

    async def submit(
        self,
        settings: OpenAISettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> ChatCompletionResponse:
        """Send the request and return the whole response.

        ``settings`` defaults to ``OpenAISettings()`` read from the environment.
        """
        return await self._submit(settings, client)

    async def stream(
        self,
        settings: OpenAISettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> ChatCompletionResponseStream:
        return await self._stream(settings, client)
