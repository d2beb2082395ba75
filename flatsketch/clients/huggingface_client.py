""" Клиент Hugging Face Inference API (text-to-image) """
from __future__ import annotations

from typing import Any, Mapping

import httpx

from flatsketch.configs.logging import get_logger
from flatsketch.schemas.errors.flat_sketch import (
    MissingCredentialError,
    UpstreamClientError,
)


class HuggingFaceInferenceClient:
    """
    POST {base_url}/{model} с {"inputs", "parameters"}; в ответ сырые байты картинки.
    """

    CREDENTIAL_NAME = "HUGGINGFACE_API_KEY"

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        base_url: str = "https://router.huggingface.co/hf-inference/models",
        timeout_sec: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.log = get_logger(__name__)
        self._api_key = api_key
        self._model = model
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": "image/png"},
            timeout=httpx.Timeout(timeout_sec, connect=10.0),
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def text_to_image(
        self,
        *,
        prompt: str,
        parameters: Mapping[str, Any],
    ) -> bytes:
        if not self._api_key:
            raise MissingCredentialError(self.CREDENTIAL_NAME)

        self.log.debug("Hugging Face text-to-image call", model=self._model)
        r = await self._client.post(
            f"/{self._model}",
            json={"inputs": prompt, "parameters": dict(parameters)},
            headers={"Authorization": f"Bearer {self._api_key}"},
        )

        if r.status_code == 401 or r.status_code == 403:
            raise UpstreamClientError(
                f"Unauthorized/Forbidden: check {self.CREDENTIAL_NAME}."
            )
        if r.status_code != 200:
            raise UpstreamClientError(
                f"Hugging Face API error {r.status_code}: {self._error_message(r)}"
            )

        content_type = r.headers.get("content-type", "")
        if not content_type.startswith("image/"):
            raise UpstreamClientError(
                f"Expected image bytes, got {content_type or 'unknown content type'}"
            )
        if not r.content:
            raise UpstreamClientError("Hugging Face API returned an empty image")
        return r.content

    @staticmethod
    def _error_message(r: httpx.Response) -> str:
        try:
            body = r.json()
        except ValueError:
            return r.text
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return r.text
