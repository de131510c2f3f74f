from ryst_openai.completion.request import CompletionRequest
from ryst_openai.completion.response import (
    CompletionChoice,
    CompletionResponse,
    CompletionResponseStream,
    CompletionUsage,
    Logprobs,
)

__all__ = [
    "CompletionChoice",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionResponseStream",
    "CompletionUsage",
    "Logprobs",
]
