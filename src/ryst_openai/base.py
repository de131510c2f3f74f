"""Request builder shared by the completion and chat completion endpoints."""
from typing import Any, ClassVar, Self

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ryst_openai.config import OpenAISettings
from ryst_openai.errors import InvalidArgumentError, InvalidStateError
from ryst_openai.http_client import build_headers, create_http_client, open_stream, post_json
from ryst_openai.logging import new_request_id
from ryst_openai.streaming import ResponseStream

MAX_STOP_SEQUENCES = 4

log = structlog.get_logger(__name__)


class BaseRequest(BaseModel):
    """Fields, setters and transport common to every request type.

    Subclasses set ``endpoint``, ``response_model`` and ``stream_class`` and
    add their own input fields. Unset options are left out of the JSON body.
    """

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    endpoint: ClassVar[str]
    response_model: ClassVar[type[BaseModel]]
    stream_class: ClassVar[type[ResponseStream[Any]]]

    model: str
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    streaming: bool | None = Field(default=None, alias="stream")
    stop: list[str] | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    logit_bias: dict[str, int] | None = None
    user: str | None = None

    def with_max_tokens(self, max_tokens: int) -> Self:
        """The maximum number of tokens to generate."""
        self.max_tokens = max_tokens
        return self

    def with_temperature(self, temperature: float) -> Self:
        """Sampling temperature. Do not combine with ``with_top_p``."""
        self.temperature = temperature
        return self

    def with_top_p(self, top_p: float) -> Self:
        """Nucleus sampling: only tokens within the ``top_p`` probability mass
        are considered. Do not combine with ``with_temperature``.
        """
        self.top_p = top_p
        return self

    def with_n(self, n: int) -> Self:
        """How many choices to generate."""
        self.n = n
        return self

    def with_stop(self, stop: str) -> Self:
        """A single stop sequence; replaces anything set by ``with_stops``."""
        self.stop = [stop]
        return self

    def with_stops(self, stops: list[str]) -> Self:
        """Up to 4 stop sequences; replaces anything set by ``with_stop``.

        The generated text never contains the stop sequence itself.
        """
        self.stop = list(stops)
        return self

    def with_presence_penalty(self, presence_penalty: float) -> Self:
        """Penalize tokens that already appeared, between -2.0 and 2.0.

        Higher values push the model toward new topics. The range is checked
        by the API, not here.
        """
        self.presence_penalty = presence_penalty
        return self

    def with_frequency_penalty(self, frequency_penalty: float) -> Self:
        """Penalize tokens by how often they appeared, between -2.0 and 2.0."""
        self.frequency_penalty = frequency_penalty
        return self

    def with_logit_bias(self, logit_bias: dict[str, int]) -> Self:
        """Bias specific token ids, from -100 (ban) to 100 (force).

        For example ``{"50256": -100}`` keeps ``<|endoftext|>`` from being
        generated.
        """
        self.logit_bias = dict(logit_bias)
        return self

    def with_user(self, user: str) -> Self:
        """An id for the end user, used by the API for abuse monitoring."""
        self.user = user
        return self

    def check_arguments(self) -> None:
        """Reject option combinations the API would refuse with an unclear error."""
        if self.stop is not None and len(self.stop) > MAX_STOP_SEQUENCES:
            raise InvalidArgumentError(
                "stop", f"You can only provide up to {MAX_STOP_SEQUENCES} stop sequences"
            )
        if self.temperature is not None and self.top_p is not None:
            raise InvalidArgumentError("temperature", "Use temperature or top_p but not both")

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    async def _submit(
        self,
        settings: OpenAISettings | None,
        client: httpx.AsyncClient | None,
    ) -> Any:
        settings = settings or OpenAISettings()
        request_id = new_request_id()
        headers = build_headers(settings, request_id)
        self.check_arguments()
        if self.streaming:
            raise InvalidArgumentError("stream", "Use stream() instead of submit()")

        url = settings.url_for(self.endpoint)
        http = client or create_http_client(settings.timeout_seconds)
        with structlog.contextvars.bound_contextvars(
            request_id=request_id, endpoint=self.endpoint, model=self.model, stream=False
        ):
            try:
                resp = await post_json(http, url, json=self.to_body(), headers=headers)
            finally:
                if client is None:
                    await http.aclose()
            try:
                result = self.response_model.model_validate_json(resp.content)
            except ValidationError as e:
                log.warning("openai_response_invalid", error_count=e.error_count())
                raise InvalidStateError(str(e)) from e
            log.debug("openai_response", choices=len(getattr(result, "choices", [])))
        return result

    async def _stream(
        self,
        settings: OpenAISettings | None,
        client: httpx.AsyncClient | None,
    ) -> Any:
        settings = settings or OpenAISettings()
        request_id = new_request_id()
        headers = build_headers(settings, request_id)
        self.check_arguments()

        body = self.to_body()
        body["stream"] = True
        url = settings.url_for(self.endpoint)
        http = client or create_http_client(settings.timeout_seconds)
        with structlog.contextvars.bound_contextvars(
            request_id=request_id, endpoint=self.endpoint, model=self.model, stream=True
        ):
            try:
                resp = await open_stream(http, url, json=body, headers=headers)
            except BaseException:
                if client is None:
                    await http.aclose()
                raise
        return self.stream_class.from_response(resp, owned_client=http if client is None else None)
