"""HTTP transport: auth headers, one POST per call, status classification."""
from typing import Any

import httpx
import structlog

from ryst_openai.config import OpenAISettings
from ryst_openai.errors import InternalError, InvalidArgumentError, InvalidStateError

log = structlog.get_logger(__name__)


def create_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create async HTTP client without transport-level retries."""
    transport = httpx.AsyncHTTPTransport(retries=0)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        transport=transport,
    )


def build_headers(settings: OpenAISettings, request_id: str) -> dict[str, str]:
    if not settings.api_key:
        raise InvalidStateError("OPENAI_API_KEY env variable must be set")
    headers = {
        "Authorization": f"Bearer {settings.api_key}",
        "Content-Type": "application/json",
        "X-Request-ID": request_id,
    }
    if settings.api_org:
        headers["OpenAI-Organization"] = settings.api_org
    return headers


def error_for_status(status_code: int, text: str) -> InvalidArgumentError | InternalError:
    """4xx is the caller's fault, anything else is ours."""
    if 400 <= status_code < 500:
        return InvalidArgumentError("request", text)
    return InternalError(text)


async def _raise_for_status(response: httpx.Response, **log_fields: Any) -> None:
    if response.is_success:
        return
    try:
        await response.aread()
        text = response.text
    except httpx.HTTPError as e:
        raise InvalidStateError(str(e)) from e
    finally:
        await response.aclose()
    log.warning("openai_request_failed", status_code=response.status_code, **log_fields)
    raise error_for_status(response.status_code, text)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    json: Any,
    headers: dict[str, str],
) -> httpx.Response:
    """POST ``json`` and return the successful, fully read response."""
    log_fields = {"url": url}
    log.debug("openai_request", **log_fields)
    try:
        resp = await client.post(url, json=json, headers=headers)
    except httpx.RequestError as e:
        log.warning("openai_transport_error", error=str(e), **log_fields)
        raise InternalError.from_source(e) from e
    await _raise_for_status(resp, **log_fields)
    return resp


async def open_stream(
    client: httpx.AsyncClient,
    url: str,
    *,
    json: Any,
    headers: dict[str, str],
) -> httpx.Response:
    """POST ``json`` and return the successful response with its body still unread.

    The caller owns the returned response and must close it.
    """
    log_fields = {"url": url}
    log.debug("openai_request", **log_fields)
    request = client.build_request("POST", url, json=json, headers=headers)
    try:
        resp = await client.send(request, stream=True)
    except httpx.RequestError as e:
        log.warning("openai_transport_error", error=str(e), **log_fields)
        raise InternalError.from_source(e) from e
    await _raise_for_status(resp, **log_fields)
    return resp
