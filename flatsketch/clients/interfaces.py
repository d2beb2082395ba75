""" Narrow client protocols for the two upstream models """
from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class ReasoningModelClient(Protocol):
    async def complete(
        self,
        *,
        system: str,
        content: str | Sequence[Mapping[str, Any]],
        max_tokens: int,
    ) -> list[dict[str, Any]]:
        """Send one user message and return the response content blocks."""

    async def aclose(self) -> None:
        """Release the underlying HTTP resources."""


class ImageModelClient(Protocol):
    async def text_to_image(
        self,
        *,
        prompt: str,
        parameters: Mapping[str, Any],
    ) -> bytes:
        """Render one image and return its raw bytes."""

    async def aclose(self) -> None:
        """Release the underlying HTTP resources."""
