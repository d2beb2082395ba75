"""Shared pytest fixtures for flat sketch tests."""

import os

os.environ.setdefault("ENV", "test")

from typing import Any, Generator, Mapping, Sequence

import anyio
import pytest
from fastapi.testclient import TestClient

from flatsketch.configs.flat_sketch import FlatSketchConfig
from flatsketch.services.flat_sketch_generator import FlatSketchGeneratorService
from flatsketch.services.prompt_enhancer import PromptEnhancerService

ENHANCED_PROMPT = (
    "Relaxed-fit pullover hoodie, dropped shoulders, two-piece lined hood with "
    "flat drawcord, front kangaroo pocket with bartacked openings, 1x1 rib cuffs "
    "and hem band, coverstitched seams"
)
CONSTRUCTION_DETAILS = (
    "- Fabric: 320gsm cotton fleece\n"
    "- Seams: 4-thread overlock, coverstitch topstitching\n"
    "- Care: machine wash cold"
)


def text_blocks(text: str) -> list[dict[str, Any]]:
    return [{"type": "text", "text": text}]


class FakeReasoningClient:
    """Test double for the reasoning model; routes by system prompt."""

    def __init__(
        self,
        *,
        enhance_blocks: list[dict[str, Any]] | None = None,
        details_blocks: list[dict[str, Any]] | None = None,
        enhance_error: Exception | None = None,
        details_error: Exception | None = None,
    ) -> None:
        self.enhance_blocks = (
            text_blocks(ENHANCED_PROMPT) if enhance_blocks is None else enhance_blocks
        )
        self.details_blocks = (
            text_blocks(CONSTRUCTION_DETAILS) if details_blocks is None else details_blocks
        )
        self.enhance_error = enhance_error
        self.details_error = details_error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def complete(
        self,
        *,
        system: str,
        content: str | Sequence[Mapping[str, Any]],
        max_tokens: int,
    ) -> list[dict[str, Any]]:
        self.calls.append({"system": system, "content": content, "max_tokens": max_tokens})
        await anyio.sleep(0)
        if system == PromptEnhancerService.SYSTEM_PROMPT:
            if self.enhance_error:
                raise self.enhance_error
            return self.enhance_blocks
        if self.details_error:
            raise self.details_error
        return self.details_blocks

    async def aclose(self) -> None:
        self.closed = True


class FakeImageClient:
    """Test double for the image model; call N returns b"image-N"."""

    def __init__(self, *, fail_on_call: int | None = None, error: Exception | None = None) -> None:
        self.fail_on_call = fail_on_call
        self.error = error or RuntimeError("model overloaded")
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def text_to_image(self, *, prompt: str, parameters: Mapping[str, Any]) -> bytes:
        self.calls.append({"prompt": prompt, "parameters": dict(parameters)})
        call_number = len(self.calls)
        await anyio.sleep(0)
        if self.fail_on_call == call_number:
            raise self.error
        return f"image-{call_number}".encode()

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def config() -> FlatSketchConfig:
    """Config with both credentials present; clients are always faked."""
    return FlatSketchConfig(
        anthropic_api_key="test-anthropic-key",
        huggingface_api_key="test-hf-key",
    )


@pytest.fixture
def reasoning_client() -> FakeReasoningClient:
    return FakeReasoningClient()


@pytest.fixture
def image_client() -> FakeImageClient:
    return FakeImageClient()


@pytest.fixture
def service(
    config: FlatSketchConfig,
    reasoning_client: FakeReasoningClient,
    image_client: FakeImageClient,
) -> FlatSketchGeneratorService:
    return FlatSketchGeneratorService(
        config, reasoning_client=reasoning_client, image_client=image_client
    )


@pytest.fixture
def test_client(service: FlatSketchGeneratorService) -> Generator[TestClient, None, None]:
    """TestClient with the generator service swapped for one built on fakes."""
    from main import app
    from flatsketch.routers.v1.flat_sketch import get_flat_sketch_service

    app.dependency_overrides[get_flat_sketch_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
