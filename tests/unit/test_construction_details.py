"""Unit tests for ConstructionDetailService."""

import pytest

from conftest import CONSTRUCTION_DETAILS, FakeReasoningClient
from flatsketch.schemas.errors.flat_sketch import UpstreamDetailGenerationError
from flatsketch.services.construction_details import ConstructionDetailService

pytestmark = pytest.mark.anyio


async def test_returns_details_text():
    client = FakeReasoningClient()
    assert await ConstructionDetailService(client).generate("hoodie") == CONSTRUCTION_DETAILS


async def test_uses_enhanced_prompt_and_token_limit():
    client = FakeReasoningClient()
    await ConstructionDetailService(client).generate("boxy denim jacket")
    call = client.calls[0]
    assert call["max_tokens"] == 800
    assert call["content"] == "Generate construction details for this garment: boxy denim jacket"
    for section in ("Fabric", "measurements", "Construction techniques", "finishes", "Care"):
        assert section in call["system"]
    assert "bulleted list" in call["system"]


async def test_non_text_response_uses_placeholder():
    client = FakeReasoningClient(details_blocks=[{"type": "tool_use"}])
    details = await ConstructionDetailService(client).generate("hoodie")
    assert details == "Construction details unavailable."


async def test_upstream_failure_is_wrapped():
    client = FakeReasoningClient(details_error=TimeoutError("read timeout"))
    with pytest.raises(UpstreamDetailGenerationError, match="read timeout"):
        await ConstructionDetailService(client).generate("hoodie")
