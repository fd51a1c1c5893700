"""Minimal httpx binding that ships encoded calls to the Bot API.

Rate limiting and retries are left to the caller: a failed call comes back
as a :class:`~tgwire.envelope.ProtocolError` whose ``retry_after`` and
``migrate_to_chat_id`` hints are already decoded.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ClientConfig
from .envelope import ProtocolError, Response, decode_response
from .errors import MalformedPayloadError, TelegramTransportError
from .methods import BotRequest
from .multipart import build_payload_async

logger = logging.getLogger(__name__)


class BotApiClient:
    def __init__(
        self,
        *,
        bot_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        body_part: Optional[str] = None,
    ) -> None:
        if not bot_token:
            raise ValueError("bot_token must be non-empty")
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/bot{bot_token}",
            timeout=timeout_seconds,
        )
        self._body_part = body_part

    @classmethod
    def from_config(cls, config: ClientConfig) -> "BotApiClient":
        if not config.bot_token:
            raise ValueError(
                f"bot token missing; set {config.bot_token_env} in the environment"
            )
        return cls(
            bot_token=config.bot_token,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            body_part=config.body_part,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "BotApiClient":
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.close()

    async def call(self, request: BotRequest) -> Response:
        """Send *request*; returns ``Success`` or ``ProtocolError``."""
        payload = await build_payload_async(request, body_part=self._body_part)
        method = payload.method
        logger.info(
            "Calling %s (%s)", method, "multipart" if payload.is_multipart else "json"
        )
        try:
            response = await self._client.post(f"/{method}", **payload.to_httpx())
        except httpx.HTTPError as exc:
            raise TelegramTransportError(
                f"Bot API network error for {method}: {exc}"
            ) from exc
        body = _response_json(method, response)
        outcome = decode_response(body, request.result)
        if isinstance(outcome, ProtocolError):
            logger.warning(
                "Bot API %s failed: status=%s code=%s description=%r retry_after=%s",
                method,
                response.status_code,
                outcome.code,
                outcome.description,
                outcome.retry_after,
            )
        return outcome

    async def request(self, request: BotRequest) -> Any:
        """Send *request* and return its result, raising on failure."""
        return (await self.call(request)).unwrap()


def _response_json(method: str, response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        body_preview = (response.text or "").strip().replace("\n", " ")[:200]
        raise MalformedPayloadError(
            f"Bot API returned non-JSON response for {method}: "
            f"status={response.status_code} body={body_preview!r}"
        ) from exc


__all__ = ["BotApiClient"]
