""" Улучшение пользовательского описания через reasoning-модель """
from __future__ import annotations

from typing import Any

from flatsketch.clients.anthropic_client import build_image_part, first_text_block
from flatsketch.clients.interfaces import ReasoningModelClient
from flatsketch.configs.logging import get_logger
from flatsketch.schemas.errors.flat_sketch import (
    MissingCredentialError,
    UpstreamEnhancementError,
)


class PromptEnhancerService:
    """
    Превращает «сырое» описание (и/или референс) в технический промпт для flat sketch.
    """

    SYSTEM_PROMPT = (
        "You are a fashion design expert specializing in technical flat sketches.\n"
        "Your job is to convert rough garment descriptions or sketches into detailed, "
        "technical prompts for generating professional flat sketches.\n"
        "\n"
        "A flat sketch is a technical drawing showing:\n"
        "- Front and/or back view of the garment\n"
        "- Clean, professional line art (black and white or minimal color)\n"
        "- All construction details (seams, pockets, closures, etc.)\n"
        "- Proper proportions and fit\n"
        "- No model, no background, just the garment\n"
        "\n"
        "Given a user's description, create a detailed prompt that will generate an "
        "accurate flat sketch. Include:\n"
        "- Garment type and silhouette\n"
        "- Key construction details (collars, cuffs, closures, pockets, etc.)\n"
        "- Specific design elements (pleats, gathers, panels, etc.)\n"
        "- Fit and proportions\n"
        "- Any unique features\n"
        "\n"
        "Keep the prompt concise but technical. Output only the enhanced prompt, "
        "nothing else."
    )
    IMAGE_ONLY_INSTRUCTION = (
        "Analyze this garment sketch and describe it in detail "
        "for technical flat sketch generation."
    )
    MAX_TOKENS = 500

    def __init__(self, client: ReasoningModelClient) -> None:
        self.log = get_logger(__name__)
        self._client = client

    async def enhance(self, prompt: str | None, image_url: str | None = None) -> str:
        """
        Возвращает улучшенный промпт. Если модель ответила не текстом,
        исходный prompt (или инструкцию анализа референса, если prompt пуст).
        """
        user_text = prompt if prompt and prompt.strip() else self.IMAGE_ONLY_INSTRUCTION
        content: list[dict[str, Any]] = [{"type": "text", "text": user_text}]
        if image_url and image_url.strip():
            content.append(build_image_part(image_url))

        try:
            blocks = await self._client.complete(
                system=self.SYSTEM_PROMPT,
                content=content,
                max_tokens=self.MAX_TOKENS,
            )
        except MissingCredentialError:
            raise
        except Exception as e:
            raise UpstreamEnhancementError(
                f"Failed to enhance prompt with Claude: {e}"
            ) from e

        enhanced = first_text_block(blocks)
        if enhanced is None:
            self.log.warning("Enhancement returned no text block, using original prompt")
            return user_text
        return enhanced.strip()
