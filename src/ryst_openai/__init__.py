"""Async SDK for the OpenAI completion and chat completion APIs."""
from ryst_openai.chat_completion import (
    ChatChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatCompletionResponseStream,
    ChatUsage,
    Message,
)
from ryst_openai.completion import (
    CompletionChoice,
    CompletionRequest,
    CompletionResponse,
    CompletionResponseStream,
    CompletionUsage,
    Logprobs,
)
from ryst_openai.config import OpenAISettings
from ryst_openai.errors import (
    InternalError,
    InvalidArgumentError,
    InvalidStateError,
    OpenAIError,
)

__all__ = [
    "ChatChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionResponseStream",
    "ChatUsage",
    "CompletionChoice",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionResponseStream",
    "CompletionUsage",
    "InternalError",
    "InvalidArgumentError",
    "InvalidStateError",
    "Logprobs",
    "Message",
    "OpenAISettings",
    "OpenAIError",
]
