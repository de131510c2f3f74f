"""Builder for completion requests."""
from typing import ClassVar, Self

import httpx

from ryst_openai.base import BaseRequest
from ryst_openai.config import OpenAISettings
from ryst_openai.completion.response import CompletionResponse, CompletionResponseStream


class CompletionRequest(BaseRequest):
    """Completion request builder.

    ``model`` and ``prompt`` are required; everything else is optional and
    set through the ``with_*`` methods:

        response = await (
            CompletionRequest(model="babbage-002", prompt="Say this is a test")
            .with_max_tokens(15)
            .submit()
        )
    """

    endpoint: ClassVar[str] = "/v1/completions"
    response_model: ClassVar[type[CompletionResponse]] = CompletionResponse
    stream_class: ClassVar[type[CompletionResponseStream]] = CompletionResponseStream

    prompt: str
    suffix: str | None = None
    logprobs: int | None = None
    echo: bool | None = None
    best_of: int | None = None

    def with_suffix(self, suffix: str) -> Self:
        """Text that comes after the inserted completion. Only some models support it."""
        self.suffix = suffix
        return self

    def with_logprobs(self, logprobs: int) -> Self:
        """Return log probabilities for the ``logprobs`` most likely tokens as
        well as the chosen ones.
        """
        self.logprobs = logprobs
        return self

    def with_echo(self, echo: bool) -> Self:
        self.echo = echo
        return self

    def with_best_of(self, best_of: int) -> Self:
        """Generate ``best_of`` completions server-side and return the one with
        the highest log probability per token.
        """
        self.best_of = best_of
        return self

    async def submit(
        self,
        settings: OpenAISettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> CompletionResponse:
        """Send the request and return the whole response.

        ``settings`` defaults to ``OpenAISettings()`` read from the environment,
        so ``OPENAI_API_KEY`` must be set; ``OPENAI_API_ORG`` is optional.
        """
        return await self._submit(settings, client)

    async def stream(
        self,
        settings: OpenAISettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> CompletionResponseStream:
        """Send the request with streaming enabled and return the open stream."""
        return await self._stream(settings, client)
