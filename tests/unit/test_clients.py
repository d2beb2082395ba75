"""Wire-format tests for the upstream HTTP clients using httpx.MockTransport."""

import json

import httpx
import pytest

from flatsketch.clients.anthropic_client import (
    AnthropicMessagesClient,
    build_image_part,
    first_text_block,
)
from flatsketch.clients.huggingface_client import HuggingFaceInferenceClient
from flatsketch.schemas.errors.flat_sketch import MissingCredentialError, UpstreamClientError

pytestmark = pytest.mark.anyio

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


def _anthropic(handler, api_key="sk-test"):
    return AnthropicMessagesClient(
        api_key=api_key,
        model="claude-3-5-sonnet-20241022",
        transport=httpx.MockTransport(handler),
    )


def _huggingface(handler, api_key="hf-test"):
    return HuggingFaceInferenceClient(
        api_key=api_key,
        model="stabilityai/stable-diffusion-xl-base-1.0",
        transport=httpx.MockTransport(handler),
    )


class TestAnthropicMessagesClient:
    async def test_request_shape(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"content": [{"type": "text", "text": "ok"}]})

        client = _anthropic(handler)
        blocks = await client.complete(
            system="sys", content=[{"type": "text", "text": "hi"}], max_tokens=500
        )
        await client.aclose()

        assert blocks == [{"type": "text", "text": "ok"}]
        assert seen["url"] == "https://api.anthropic.com/v1/messages"
        assert seen["headers"]["x-api-key"] == "sk-test"
        assert seen["headers"]["anthropic-version"] == "2023-06-01"
        assert seen["body"] == {
            "model": "claude-3-5-sonnet-20241022",
            "max_tokens": 500,
            "system": "sys",
            "messages": [{"role": "user", "content": [{"type": "text", "text": "hi"}]}],
        }

    async def test_missing_key_makes_no_request(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(MissingCredentialError, match="ANTHROPIC_API_KEY not configured"):
            await _anthropic(handler, api_key=None).complete(system="s", content="c", max_tokens=1)

    async def test_error_message_is_extracted(self):
        def handler(request):
            return httpx.Response(
                529, json={"type": "error", "error": {"type": "overloaded_error", "message": "Overloaded"}}
            )

        with pytest.raises(UpstreamClientError, match="529: Overloaded"):
            await _anthropic(handler).complete(system="s", content="c", max_tokens=1)

    async def test_unauthorized(self):
        with pytest.raises(UpstreamClientError, match="ANTHROPIC_API_KEY"):
            await _anthropic(lambda r: httpx.Response(401)).complete(
                system="s", content="c", max_tokens=1
            )


class TestAnthropicHelpers:
    def test_first_text_block(self):
        assert first_text_block([{"type": "text", "text": "a"}, {"type": "text", "text": "b"}]) == "a"
        assert first_text_block([{"type": "tool_use"}, {"type": "text", "text": "b"}]) is None
        assert first_text_block([]) is None

    def test_build_image_part_for_png_data_uri(self):
        assert build_image_part("data:image/png;base64,iVBORw0KGgo=") == {
            "type": "image",
            "source": {"type": "base64", "media_type": "image/png", "data": "iVBORw0KGgo="},
        }

    def test_build_image_part_for_url(self):
        part = build_image_part("https://cdn.example.com/sketch.webp")
        assert part["source"] == {"type": "url", "url": "https://cdn.example.com/sketch.webp"}


class TestHuggingFaceInferenceClient:
    async def test_request_shape_and_bytes(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, content=PNG_BYTES, headers={"content-type": "image/png"})

        client = _huggingface(handler)
        raw = await client.text_to_image(prompt="p", parameters={"width": 768})
        await client.aclose()

        assert raw == PNG_BYTES
        assert seen["url"] == (
            "https://router.huggingface.co/hf-inference/models/"
            "stabilityai/stable-diffusion-xl-base-1.0"
        )
        assert seen["auth"] == "Bearer hf-test"
        assert seen["body"] == {"inputs": "p", "parameters": {"width": 768}}

    async def test_missing_key(self):
        with pytest.raises(MissingCredentialError, match="HUGGINGFACE_API_KEY not configured"):
            await _huggingface(lambda r: httpx.Response(200), api_key=None).text_to_image(
                prompt="p", parameters={}
            )

    async def test_loading_model_error(self):
        def handler(request):
            return httpx.Response(503, json={"error": "Model is currently loading"})

        with pytest.raises(UpstreamClientError, match="503: Model is currently loading"):
            await _huggingface(handler).text_to_image(prompt="p", parameters={})

    async def test_non_image_payload_is_rejected(self):
        def handler(request):
            return httpx.Response(200, json={"generated": True})

        with pytest.raises(UpstreamClientError, match="Expected image bytes"):
            await _huggingface(handler).text_to_image(prompt="p", parameters={})
