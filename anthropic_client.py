"""HTTP client for a single Anthropic Messages request/response cycle."""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from errors import APIStatusError, ConfigurationError, ResponseFormatError, TransportError
from messages import MessageRequest, MessageResponse

ANTHROPIC_API_VERSION = "2023-06-01"
ANTHROPIC_ENDPOINT = "https://api.anthropic.com/v1/messages"

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Posts a :class:`MessageRequest` to the Messages endpoint and parses the reply.

    Every call to :meth:`send_message` performs exactly one POST. Nothing is
    retried or cached; any failure is raised as a :class:`TransportError`.
    """

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = ANTHROPIC_ENDPOINT,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ConfigurationError("An Anthropic API key is required")
        self._api_key = api_key.strip()
        self.endpoint = endpoint
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self._api_key,
            "anthropic-version": ANTHROPIC_API_VERSION,
            "content-type": "application/json",
        }

    def send_message(self, request: MessageRequest) -> MessageResponse:
        body = request.to_json()
        logger.debug(
            "POST %s model=%s messages=%d bytes=%d",
            self.endpoint,
            request.model.value,
            len(request.messages),
            len(body),
        )

        try:
            response = self._client.post(self.endpoint, content=body, headers=self._headers())
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {self.endpoint} failed: {exc}") from exc

        logger.debug("Anthropic responded with HTTP %d", response.status_code)

        if response.is_error:
            raise _status_error(response)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ResponseFormatError(f"Response body is not valid JSON: {exc}") from exc
        return MessageResponse.from_payload(payload)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "AnthropicClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _status_error(response: httpx.Response) -> APIStatusError:
    """Build an error from a failed response, using the API's error envelope when present."""

    status = response.status_code
    detail = response.reason_phrase or "error"
    error_kind: Optional[str] = None

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        error = payload["error"]
        error_kind = error.get("type") if isinstance(error.get("type"), str) else None
        message = error.get("message")
        if isinstance(message, str) and message:
            detail = message

    label = f"{status} {error_kind}" if error_kind else str(status)
    return APIStatusError(f"Anthropic API error ({label}): {detail}", status_code=status, error_kind=error_kind)


__all__ = ["ANTHROPIC_API_VERSION", "ANTHROPIC_ENDPOINT", "AnthropicClient"]
