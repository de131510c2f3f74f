"""Response types for the completions endpoint."""
from typing import Any

from pydantic import BaseModel, StrictFloat, field_validator

from ryst_openai.logprobs import flatten_top_logprobs
from ryst_openai.streaming import ResponseStream


class CompletionUsage(BaseModel):
    """Tokens consumed by the request and the completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class Logprobs(BaseModel):
    tokens: list[str]
    token_logprobs: list[float]
    top_logprobs: dict[str, StrictFloat]
    text_offset: list[int]

    @field_validator("top_logprobs", mode="before")
    @classmethod
    def flatten(cls, v: Any) -> Any:
        # The API sends one {token: logprob} map per position.
        return flatten_top_logprobs(v)


class CompletionChoice(BaseModel):
    """One generated completion."""

    text: str
    index: int
    logprobs: Logprobs | None = None
    finish_reason: str


class CompletionResponse(BaseModel):
    id: str
    object: str
    created: int
    model: str
    choices: list[CompletionChoice]
    usage: CompletionUsage


class CompletionResponseStream(ResponseStream[CompletionResponse]):
    """Stream handle returned by ``CompletionRequest.stream()``."""

    response_model = CompletionResponse
