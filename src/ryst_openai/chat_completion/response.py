"""Response types for the chat completions endpoint."""
from pydantic import BaseModel

from ryst_openai.streaming import ResponseStream


class Message(BaseModel):
    """One chat turn: ``role`` is ``system``, ``user`` or ``assistant``."""

    role: str
    content: str


class ChatUsage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatChoice(BaseModel):
    message: Message
    index: int
    finish_reason: str


class ChatCompletionResponse(BaseModel):
    id: str
    object: str
    created: int
    model: str
    choices: list[ChatChoice]
    usage: ChatUsage


class ChatCompletionResponseStream(ResponseStream[ChatCompletionResponse]):
    """Stream handle returned by ``ChatCompletionRequest.stream()``."""

    response_model = ChatCompletionResponse
