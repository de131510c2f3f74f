from ryst_openai.chat_completion.request import ChatCompletionRequest
from ryst_openai.chat_completion.response import (
    ChatChoice,
    ChatCompletionResponse,
    ChatCompletionResponseStream,
    ChatUsage,
    Message,
)

__all__ = [
    "ChatChoice",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionResponseStream",
    "ChatUsage",
    "Message",
]
