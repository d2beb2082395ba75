""" Клиент Anthropic Messages API (reasoning model) """
from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

import httpx

from flatsketch.configs.logging import get_logger
from flatsketch.schemas.errors.flat_sketch import (
    MissingCredentialError,
    UpstreamClientError,
)

_DATA_URI_RE = re.compile(
    r"^data:(?P<media_type>image/[\w.+-]+);base64,(?P<data>.+)$", re.DOTALL
)


def build_image_part(image_ref: str) -> dict[str, Any]:
    """
    Собирает image-блок для user-сообщения.
    data:image/...;base64 уходит как base64-источник, всё остальное как URL.
    """
    match = _DATA_URI_RE.match(image_ref.strip())
    if match:
        return {
            "type": "image",
            "source": {
                "type": "base64",
                "media_type": match.group("media_type"),
                "data": match.group("data"),
            },
        }
    return {"type": "image", "source": {"type": "url", "url": image_ref}}


def first_text_block(blocks: Sequence[Mapping[str, Any]]) -> str | None:
    """
    Текст первого content-блока, если он текстовый и непустой; иначе None.
    """
    if not blocks:
        return None
    first = blocks[0]
    if first.get("type") != "text":
        return None
    text = first.get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    return text


class AnthropicMessagesClient:
    """
    Тонкая обёртка над POST /v1/messages.
    - один system-промпт, одно user-сообщение
    - без ретраев: любая ошибка сразу уходит наверх
    """

    API_VERSION = "2023-06-01"
    CREDENTIAL_NAME = "ANTHROPIC_API_KEY"

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        base_url: str = "https://api.anthropic.com",
        timeout_sec: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.log = get_logger(__name__)
        self._api_key = api_key
        self._model = model
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "anthropic-version": self.API_VERSION,
                "content-type": "application/json",
            },
            timeout=httpx.Timeout(timeout_sec, connect=10.0),
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def complete(
        self,
        *,
        system: str,
        content: str | Sequence[Mapping[str, Any]],
        max_tokens: int,
    ) -> list[dict[str, Any]]:
        if not self._api_key:
            raise MissingCredentialError(self.CREDENTIAL_NAME)

        payload = {
            "model": self._model,
            "max_tokens": max_tokens,
            "system": system,
            "messages": [
                {
                    "role": "user",
                    "content": content if isinstance(content, str) else list(content),
                }
            ],
        }
        self.log.debug(
            "Anthropic messages call", model=self._model, max_tokens=max_tokens
        )
        r = await self._client.post(
            "/v1/messages", json=payload, headers={"x-api-key": self._api_key}
        )

        if r.status_code == 401 or r.status_code == 403:
            raise UpstreamClientError(
                f"Unauthorized/Forbidden: check {self.CREDENTIAL_NAME}."
            )
        if r.status_code != 200:
            raise UpstreamClientError(
                f"Anthropic API error {r.status_code}: {self._error_message(r)}"
            )

        try:
            body = r.json() or {}
        except ValueError as e:
            raise UpstreamClientError(f"Anthropic API returned invalid JSON: {e}") from e
        return list(body.get("content") or [])

    @staticmethod
    def _error_message(r: httpx.Response) -> str:
        try:
            body = r.json()
        except ValueError:
            return r.text
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return r.text
